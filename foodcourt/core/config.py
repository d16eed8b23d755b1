from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Configurações básicas do projeto
    PROJECT_NAME: str = "Food Court POS"
    PROJECT_VERSION: str = "1.0.0"
    API_STR: str = "/api"
    ENVIRONMENT: str = "development"

    # Servidor
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Banco de dados
    DATABASE_URL: str = "sqlite:///./db/foodcourt.db"
    DATABASE_ECHO: bool = False

    # Fechamento do dia (day-end)
    REPORTS_DIR: str = "reports"
    CURRENCY_SYMBOL: str = "₹"

    # Paginação
    ORDERS_DEFAULT_LIMIT: int = 20
    ORDERS_MAX_LIMIT: int = 100
    CUSTOMERS_LIST_LIMIT: int = 100

    # Configurações de CORS
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Ignora variáveis extras não declaradas


settings = Settings()
