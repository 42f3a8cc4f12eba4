from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_datetime
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceEntry, StatusUpdate, parse_flag

logger = logging.getLogger(__name__)


def register(app: Flask, container) -> None:
    service = container.attendance_service

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"error": str(e)}), 404
            except Exception:
                logger.exception("Unhandled error in %s", request.path)
                return jsonify({"error": "Internal server error"}), 500

        return wrapper

    def _payload() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    @json_errors
    def record_attendance():
        result = service.record_attendance(AttendanceEntry.from_payload(_payload()))
        return jsonify(result.to_dict()), 201

    @app.route("/api/attendance/with-shift", methods=["POST"], endpoint="record_attendance_with_shift")
    @json_errors
    def record_attendance_with_shift():
        result = service.record_attendance_with_shift(AttendanceEntry.from_payload(_payload()))
        return jsonify(result.to_dict()), 201

    @app.route("/api/attendance/<int:attendance_id>", methods=["GET"], endpoint="get_attendance")
    @json_errors
    def get_attendance(attendance_id: int):
        return jsonify(service.get_record(attendance_id).to_dict())

    @app.route("/api/attendance/<int:attendance_id>/status", methods=["PUT"], endpoint="update_attendance_status")
    @json_errors
    def update_attendance_status(attendance_id: int):
        result = service.update_status(attendance_id, StatusUpdate.from_payload(_payload()))
        return jsonify(result.to_dict())

    @app.route("/api/attendance/<int:attendance_id>/edit-times", methods=["PUT"], endpoint="update_edit_times")
    @json_errors
    def update_edit_times(attendance_id: int):
        data = _payload()
        service.update_edit_times(
            attendance_id,
            edit_in_time=parse_iso_datetime(data.get("edit_in_time"), "edit_in_time"),
            edit_out_time=parse_iso_datetime(data.get("edit_out_time"), "edit_out_time"),
        )
        return jsonify({"message": "Edit times updated"})

    @app.route("/api/attendance/<int:attendance_id>/approval", methods=["PUT"], endpoint="update_approval")
    @json_errors
    def update_approval(attendance_id: int):
        data = _payload()
        service.update_approvals(
            attendance_id,
            in_approval=parse_flag(data, "in_approval", None),
            out_approval=parse_flag(data, "out_approval", None),
        )
        return jsonify({"message": "Approval status updated"})
