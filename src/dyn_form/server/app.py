"""
HTTP API for dyn-form.

Endpoints:
    GET  /api/form-schema              The form schema document
    POST /api/submissions              Validate and store a submission
    GET  /api/submissions              Paginated, sorted submission list
    GET  /api/submissions/export.csv   The same page as CSV
    GET  /api/health                   Liveness check

The app holds no global state: the schema and the store are passed to
``create_app``.
"""

import json
import logging
import re

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from dyn_form.config import DynFormConfig, get_config
from dyn_form.errors import StoreError
from dyn_form.export import submissions_to_csv
from dyn_form.models.form_schema import FormSchema
from dyn_form.models.submission import SubmissionPage
from dyn_form.storage.json_store import SubmissionStore
from dyn_form.validation import validate

logger = logging.getLogger("dyn-form")

# Leading integer, the way query strings like "2" or "2abc" are usually read
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_json_body(raw: bytes):
    """Decode a request body as strict JSON (no NaN or Infinity literals)."""
    return json.loads(raw, parse_constant=_reject_constant)


def _parse_positive_int(raw: str | None, default: int) -> int:
    """Parse a query parameter, falling back to ``default`` when missing or < 1."""
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    value = int(match.group(1))
    return value if value >= 1 else default


def create_app(
    schema: FormSchema,
    store: SubmissionStore,
    config: DynFormConfig | None = None,
) -> Starlette:
    """
    Create the Starlette app serving one form.

    Args:
        schema: The form every submission is validated against.
        store: Where accepted submissions are written.
        config: Settings for paging and CORS. If None, uses get_config().

    Returns:
        Configured Starlette application.
    """
    config = config or get_config()

    async def get_form_schema(request: Request) -> JSONResponse:
        """Serve the schema the client renders."""
        return JSONResponse(schema.to_client_config())

    async def create_submission(request: Request) -> JSONResponse:
        """Validate a payload and store it if accepted."""
        try:
            payload = _parse_json_body(await request.body())
        except ValueError:
            return JSONResponse(
                {"success": False, "errors": {"_body": "Invalid JSON body."}},
                status_code=400,
            )

        result = validate(schema, payload)
        if not result.is_valid:
            logger.info(f"Rejected submission, invalid fields: {', '.join(result.errors)}")
            return JSONResponse(
                {"success": False, "errors": result.to_error_dict()},
                status_code=400,
            )

        data = payload if isinstance(payload, dict) else {}
        record = await run_in_threadpool(store.append, data)
        logger.info(f"Accepted submission {record.id}")

        return JSONResponse(
            {"success": True, "id": record.id, "createdAt": record.created_at},
            status_code=201,
        )

    async def _load_page(request: Request) -> SubmissionPage:
        params = request.query_params
        page = _parse_positive_int(params.get("page"), 1)
        limit = _parse_positive_int(params.get("limit"), config.default_page_size)
        limit = min(limit, config.max_page_size)

        return await run_in_threadpool(
            store.list_page,
            page=page,
            limit=limit,
            sort_by=params.get("sortBy", "createdAt"),
            sort_order=params.get("sortOrder", "desc"),
        )

    async def list_submissions(request: Request) -> JSONResponse:
        """List submissions with pagination and sorting."""
        page = await _load_page(request)
        return JSONResponse(page.to_document())

    async def export_submissions(request: Request) -> Response:
        """Download the requested page of submissions as CSV."""
        page = await _load_page(request)
        return Response(
            submissions_to_csv(page.items),
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": 'attachment; filename="submissions.csv"'},
        )

    async def health_check(request: Request) -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse({"ok": True})

    async def handle_store_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Submission store failure on {request.url.path}: {exc}")
        return JSONResponse({"success": False, "error": str(exc)}, status_code=500)

    return Starlette(
        routes=[
            Route("/api/form-schema", get_form_schema, methods=["GET"]),
            Route("/api/submissions", create_submission, methods=["POST"]),
            Route("/api/submissions", list_submissions, methods=["GET"]),
            Route("/api/submissions/export.csv", export_submissions, methods=["GET"]),
            Route("/api/health", health_check, methods=["GET"]),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=config.cors_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        ],
        exception_handlers={StoreError: handle_store_error},
    )


async def run_http_server(
    app: Starlette,
    host: str = "0.0.0.0",
    port: int = 4000,
    log_level: str = "info",
) -> None:
    """
    Serve the app with uvicorn until interrupted.

    Args:
        app: Application from ``create_app``.
        host: Host to bind to.
        port: Port to listen on.
        log_level: uvicorn log level.
    """
    import uvicorn

    logger.info(f"Starting dyn-form server on {host}:{port}...")

    server_config = uvicorn.Config(app, host=host, port=port, log_level=log_level)
    server = uvicorn.Server(server_config)
    await server.serve()
