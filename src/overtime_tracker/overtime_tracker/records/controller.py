from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_year_month, today_local
from ..common.formatting import format_hours
from ..common.validators import amount_to_json, require_flag
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

CSV_FIELDS = [
    "date",
    "clock_in",
    "clock_out",
    "next_day",
    "regular",
    "early_overtime",
    "evening_overtime",
    "night_overtime",
    "weekend_day_under8",
    "weekend_night_under8",
    "weekend_day_over8",
    "weekend_night_over8",
    "total_work",
    "overtime",
    "total_pay",
]


def register(app: Flask, container: Container) -> None:
    service = container.record_service

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _month_anchor():
        month_s = request.args.get("month")
        return parse_year_month(month_s) if month_s else today_local().replace(day=1)

    @app.route("/api/records", methods=["GET"], endpoint="api_records")
    def api_records():
        try:
            records = service.list_month(_month_anchor())
        except ValidationError as e:
            return _error(str(e), 400)
        return jsonify({"success": True, "records": [r.to_dict() for r in records]})

    @app.route("/api/records/<date_str>", methods=["GET"], endpoint="api_record_get")
    def api_record_get(date_str: str):
        try:
            record = service.get(date_str)
        except ValidationError as e:
            return _error(str(e), 400)
        if not record:
            return _error(f"{date_str} 기록이 없습니다", 404)
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/records/<date_str>", methods=["PUT"], endpoint="api_record_save")
    def api_record_save(date_str: str):
        data = request.get_json(silent=True) or {}
        try:
            record = service.save(
                date_str,
                data.get("clockIn") or "",
                data.get("clockOut") or "",
                require_flag(data.get("clockOutNextDay"), "clockOutNextDay"),
                wage=data.get("wage"),
            )
        except ValidationError as e:
            return _error(str(e), 400)

        body = {"success": True, "record": record.to_dict(), "wage": amount_to_json(service.current_wage())}
        if record.result.is_empty:
            body["message"] = "출퇴근 시간을 올바르게 입력해주세요"
        return jsonify(body), 200

    @app.route("/api/records/<date_str>", methods=["DELETE"], endpoint="api_record_delete")
    def api_record_delete(date_str: str):
        try:
            service.delete(date_str)
        except NotFoundError as e:
            return _error(str(e), 404)
        except ValidationError as e:
            return _error(str(e), 400)
        return jsonify({"success": True, "message": "기록이 삭제되었습니다"})

    @app.route("/api/records.csv", methods=["GET"], endpoint="api_records_csv")
    def api_records_csv():
        try:
            anchor = _month_anchor()
        except ValidationError as e:
            return _error(str(e), 400)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for r in service.list_month(anchor):
            res = r.result
            writer.writerow(
                {
                    "date": r.date_str,
                    "clock_in": r.clock_in,
                    "clock_out": r.clock_out,
                    "next_day": "Y" if r.clock_out_next_day else "",
                    "regular": res.regular_minutes,
                    "early_overtime": res.early_overtime_minutes,
                    "evening_overtime": res.evening_overtime_minutes,
                    "night_overtime": res.night_overtime_minutes,
                    "weekend_day_under8": res.weekend_day_under8_minutes,
                    "weekend_night_under8": res.weekend_night_under8_minutes,
                    "weekend_day_over8": res.weekend_day_over8_minutes,
                    "weekend_night_over8": res.weekend_night_over8_minutes,
                    "total_work": format_hours(res.total_work_minutes),
                    "overtime": format_hours(res.overtime_minutes),
                    "total_pay": res.total_pay,
                }
            )

        filename = f"overtime_{anchor.strftime('%Y%m')}.csv"
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/wage", methods=["GET"], endpoint="api_wage_get")
    def api_wage_get():
        return jsonify({"success": True, "wage": amount_to_json(service.current_wage())})

    @app.route("/api/wage", methods=["PUT"], endpoint="api_wage_set")
    def api_wage_set():
        data = request.get_json(silent=True) or {}
        try:
            wage = service.set_wage(data.get("wage", ""))
        except ValidationError as e:
            return _error(str(e), 400)
        return jsonify({"success": True, "wage": amount_to_json(wage)})
