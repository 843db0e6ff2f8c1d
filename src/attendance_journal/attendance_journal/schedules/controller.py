from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/schedule", methods=["GET"], endpoint="schedule")
    def schedule():
        entries = container.schedule_service.get_schedule(
            teacher_id=request.args.get("teacherId"),
            day_of_week=request.args.get("dayOfWeek"),
        )
        return jsonify([e.to_schedule_dict() for e in entries])

    @app.route("/subjects", methods=["GET"], endpoint="subjects")
    def subjects():
        entries = container.schedule_service.list_subjects(teacher_id=request.args.get("teacherId"))
        return jsonify([e.to_subject_dict() for e in entries])
