from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    database_url: str
    sql_echo: bool = False
    log_level: str = "INFO"

    # Глубина поддерева блоков карточки (2 или 3 уровня)
    subtree_levels: int = 2
    # Последовательная синхронизация дерева карточки
    serialize_syncs: bool = True

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
