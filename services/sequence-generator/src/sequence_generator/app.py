"""
FastAPI application factory for the sequence generator service.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hmm_core import HMMError
from sequence_generator.routes import router


async def hmm_error_handler(request: Request, exc: HMMError) -> JSONResponse:
    """Parameter, length and seed errors are client input errors."""
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Sequence Generator",
        description="Synthetic DNA sequences from a two-state HMM",
        version="0.1.0",
    )
    app.include_router(router)
    app.add_exception_handler(HMMError, hmm_error_handler)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
