from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from phone_validator.bootstrap import initialize
from phone_validator.config import settings
from phone_validator.dependencies import init_app
from phone_validator.metrics import start_metrics_server

from .handlers import exception_middleware, validation_error_handler
from .routes import router
from .schemas import VerdictResponse

initialize()

app = FastAPI(title="Phone Validator API", version="1.0")
init_app(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.on_event("startup")
async def startup_event() -> None:
    start_metrics_server(settings.metrics_port)


app.add_exception_handler(RequestValidationError, validation_error_handler)
app.middleware("http")(exception_middleware)

__all__ = [
    "app",
    "VerdictResponse",
]
