"""FastAPI application entry point"""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Setup logging
from src.logging_config import setup_logging
setup_logging()

from src.config import settings
from api.errors import request_validation_handler, unhandled_exception_handler
from api.middleware import access_log_middleware

app = FastAPI(
    title="Tax Position Ledger API",
    description="Event ledger of sales, amendments and tax payments with as-of tax position queries",
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.ACCESS_LOG:
    app.middleware("http")(access_log_middleware)

app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.on_event("startup")
async def _init_database() -> None:
    """Ensure event tables exist"""
    from src.models.database import init_models
    await init_models()


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Tax Position Ledger API",
        "version": settings.APP_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {"status": "healthy"}


from api.routes import transactions, sale, tax_position
app.include_router(transactions.router, tags=["transactions"])
app.include_router(sale.router, tags=["sale"])
app.include_router(tax_position.router, tags=["tax-position"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
