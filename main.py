from __future__ import annotations

from atomlab.fastapi_wrapper_v1 import create_app
from config import HOST, PORT, UVICORN_WORKERS

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=HOST, port=PORT, workers=UVICORN_WORKERS)
