from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import amount_to_json, require_flag
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.record_service

    @app.route("/api/classify", methods=["POST"], endpoint="api_classify")
    def api_classify():
        """Classify a shift without storing it (preview)."""
        data = request.get_json(silent=True) or {}
        try:
            result = service.preview(
                data.get("date") or "",
                data.get("clockIn") or "",
                data.get("clockOut") or "",
                require_flag(data.get("clockOutNextDay"), "clockOutNextDay"),
                wage=data.get("wage"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        body = {"success": True, "result": result.to_dict(), "wage": amount_to_json(service.current_wage())}
        if result.is_empty:
            body["message"] = "출퇴근 시간을 올바르게 입력해주세요"
        return jsonify(body), 200
