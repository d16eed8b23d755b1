import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from foodcourt.api.router import api_router
from foodcourt.core.config import settings
from foodcourt.core.logging import configure_logging
from foodcourt.database import init_db

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Pedidos por mesa, presença dos garçons e fechamento do dia para a praça de alimentação",
    openapi_url=f"{settings.API_STR}/openapi.json",
    version=settings.PROJECT_VERSION,
)

# Configuração de CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    # Corpo malformado é erro de validação do cliente: 400, nunca 422
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.on_event("startup")
def create_tables():
    init_db()
    logger.info("Tabelas criadas com sucesso")


# Inclui todas as rotas da API
app.include_router(api_router, prefix=settings.API_STR)


@app.get("/", tags=["Root"])
def read_root():
    return {
        "message": f"Bem-vindo à API {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}",
        "docs": "/docs",
        "status": "operacional",
        "environment": settings.ENVIRONMENT,
    }


@app.get("/health", tags=["Health Check"])
def health_check():
    """Endpoint para verificação de saúde da API"""
    return {
        "status": "healthy",
        "database": "connected" if settings.DATABASE_URL else "disconnected",
        "environment": settings.ENVIRONMENT,
    }
