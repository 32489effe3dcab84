from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify

from ..core.exceptions import CalculationError, MissingSelectionError, NotFoundError, StorageError, ValidationError
from ..logging_config import error_log_path

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_errors(action: str):
    """Map domain errors of a view to JSON responses.

    Unexpected faults are logged with traceback and answered with a generic notice.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except (ValidationError, MissingSelectionError) as e:
                return json_error(str(e), 400)
            except NotFoundError as e:
                return json_error(str(e), 404)
            except StorageError as e:
                logger.exception("%s: storage failure", action)
                return json_error(f"Storage error: {e}", 503)
            except CalculationError:
                return _system_error(action)
            except Exception:
                logger.exception("%s failed", action)
                return _system_error(action)

        return wrapper

    return decorator


def _system_error(action: str):
    log_path = error_log_path()
    details = f" Details saved to log: {log_path}" if log_path else ""
    return json_error(f"System error while trying to {action}.{details}", 500)
