from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["GET"], endpoint="attendance_roster")
    def attendance_roster():
        rosters = container.attendance_query_service.get_roster(
            para_id=request.args.get("paraId"),
            visit_date=request.args.get("date"),
        )
        return jsonify([r.to_dict() for r in rosters])

    @app.route("/attendance", methods=["POST"], endpoint="attendance_update")
    def attendance_update():
        data = json_object()
        updated = container.attendance_mutation_service.apply_batch(data.get("visits"))
        return jsonify({"status": "success", "updated": updated})

    @app.route("/attendanceBySubject", methods=["GET"], endpoint="attendance_by_subject")
    def attendance_by_subject():
        students = container.attendance_report_service.by_subject(
            teacher_id=request.args.get("teacherId"),
            subject_id=request.args.get("subjectId"),
            group_id=request.args.get("groupId"),
            start_date=request.args.get("startDate"),
            end_date=request.args.get("endDate"),
        )
        return jsonify({"studentsList": [s.to_dict() for s in students]})

    @app.route("/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark():
        data = json_object()
        ok = container.attendance_mutation_service.mark_by_pair_code(
            student_id=data.get("studentId"),
            pair_code=data.get("pairCode"),
        )
        return jsonify({"ok": ok})
