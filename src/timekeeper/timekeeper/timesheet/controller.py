from __future__ import annotations

import json

from flask import Flask, jsonify, request, send_file
from werkzeug.exceptions import RequestEntityTooLarge

from ..container import Container
from ..core.constants import NO_DATA_MESSAGE
from ..core.exceptions import DomainError, ValidationError
from .export import EXCEL_MIMETYPE, EXPORT_FILENAME, write_excel
from .filters import filter_by_name
from .model import ShiftConfig


def register(app: Flask, container: Container) -> None:
    service = container.timesheet_service

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _config_from_request() -> ShiftConfig:
        raw = request.form.get("config", "").strip()
        if not raw:
            return service.default_config
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise ValidationError("Cấu hình không phải JSON hợp lệ") from e
        return ShiftConfig.from_dict(data, fallback=service.default_config)

    def _parse_request():
        file = request.files.get("file")
        if file is None or not file.filename:
            raise ValidationError("Vui lòng chọn file chấm công")
        config = _config_from_request()
        records = service.parse_upload(file.stream, file.filename, config)
        return records, filter_by_name(records, request.form.get("q"))

    @app.route("/api/config", methods=["GET"], endpoint="timesheet_config")
    def timesheet_config():
        return jsonify({"success": True, "config": service.default_config.to_dict()})

    @app.route("/api/timesheet/parse", methods=["POST"], endpoint="timesheet_parse")
    def timesheet_parse():
        try:
            records, visible = _parse_request()
        except DomainError as e:
            return _error(str(e), 400)
        except RequestEntityTooLarge:
            return _error("File vượt quá dung lượng cho phép", 413)
        except Exception:
            app.logger.exception("Timesheet parse failed")
            return _error("Lỗi hệ thống khi xử lý bảng chấm công", 500)

        if not records:
            return _error(NO_DATA_MESSAGE, 422)

        return jsonify(
            {
                "success": True,
                "total": len(records),
                "employees": [r.to_dict() for r in visible],
                "summary": service.summarize(visible).to_dict(),
            }
        )

    @app.route("/api/timesheet/export", methods=["POST"], endpoint="timesheet_export")
    def timesheet_export():
        try:
            records, visible = _parse_request()
        except DomainError as e:
            return _error(str(e), 400)
        except RequestEntityTooLarge:
            return _error("File vượt quá dung lượng cho phép", 413)
        except Exception:
            app.logger.exception("Timesheet export failed")
            return _error("Lỗi hệ thống khi xuất file", 500)

        if not records:
            return _error(NO_DATA_MESSAGE, 422)

        return send_file(
            write_excel(visible),
            mimetype=EXCEL_MIMETYPE,
            download_name=EXPORT_FILENAME,
            as_attachment=True,
        )
