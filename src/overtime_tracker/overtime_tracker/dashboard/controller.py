from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.validators import amount_to_json
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    def api_dashboard():
        """Today / this week (Mon-Sun) / this month around ?date=YYYY-MM-DD."""
        date_s = request.args.get("date")
        try:
            anchor = parse_iso_date(date_s) if date_s else today_local()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        dashboard = container.dashboard_service
        return jsonify(
            {
                "success": True,
                "wage": amount_to_json(container.record_service.current_wage()),
                "daily": dashboard.daily(anchor).as_dict(),
                "weekly": dashboard.weekly(anchor).as_dict(),
                "monthly": dashboard.monthly(anchor).as_dict(),
            }
        )
