import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response

from access_stub.config import HOST, LOGGER_NAME, PORT
from access_stub.handler import AccessHandler, decode_query

# Logging setup
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def create_app(request_logger: Optional[logging.Logger] = None) -> FastAPI:
    """Builds the stub app; every path and method goes to the access handler"""
    handler = AccessHandler(request_logger or logging.getLogger(LOGGER_NAME))

    app = FastAPI(title="Access Stub", description="Token presence stub for the makerspace access system")

    @app.api_route("/{path:path}", methods=ALL_METHODS)
    async def access(path: str, request: Request):
        """Answers an access query: any path, any method, only the token key counts"""
        raw_query = decode_query(request.scope.get("query_string", b""))
        target = request.url.path
        if raw_query:
            target = f"{target}?{raw_query}"

        body = handler.handle(target, raw_query)
        # Fixed body, sent with Content-Length rather than chunked
        return Response(content=body, media_type="application/json")

    return app


app = create_app()


def run():
    """Serves the stub on the fixed port"""
    logger.info(f"Server is running on port {PORT}")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
