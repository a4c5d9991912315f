import logging

from fastapi import FastAPI, Request, Response
from starlette.concurrency import run_in_threadpool

from .api.deps import build_router
from .api.http import ApiRequest
from .api.router import RequestRouter
from .config import get_settings

logger = logging.getLogger(__name__)

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def create_app(router: RequestRouter | None = None) -> FastAPI:
    app = FastAPI(title="Galaxy Bookings API", version="1.0.0")
    app.state.router = router

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.router is not None:
            return
        settings = get_settings()
        logging.basicConfig(level=settings.log_level)
        app.state.router = build_router(settings)
        logger.info("Request router ready", extra={"env": settings.env})

    # Every path is handed to the router, which owns matching, CORS and 404s.
    @app.api_route("/{path:path}", methods=METHODS)
    async def dispatch(request: Request) -> Response:
        body = await request.body()
        api_request = ApiRequest(
            method=request.method,
            path=request.url.path,
            body=body.decode("utf-8", errors="replace") if body else None,
            query=dict(request.query_params),
        )
        result = await run_in_threadpool(app.state.router.handle, api_request)
        return Response(
            content=result.render_body(),
            status_code=result.status_code,
            headers=result.headers,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("galaxy_api.main:app", host="0.0.0.0", port=get_settings().port)
