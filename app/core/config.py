from pydantic import Field
from pydantic_settings import BaseSettings


SUGGESTIONS = [
    "How do I consume BioBlend+?",
    "What are the benefits of BioBlend+?",
    "What is BioBlend+ made from?",
    "When should I take BioBlend+?",
]

NO_MEANINGFUL_RESPONSE = "Couldn't generate a meaningful response"
PROCESSING_ERROR = "An error occurred while processing your message"
EMPTY_MESSAGE = "Message must not be empty"
INVALID_REQUEST = "Invalid request"

class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    aws_region: str = Field(default="us-east-1")
    aws_access_key_id: str | None = Field(default=None)
    aws_secret_access_key: str | None = Field(default=None)
    agent_id: str | None = Field(default=None)
    agent_alias_id: str | None = Field(default=None)
    agent_connect_timeout: int = Field(default=10)
    agent_read_timeout: int = Field(default=120)
    agent_max_attempts: int = Field(default=2)
    api_base_url: str = Field(default="http://localhost:5050")
    default_port: int = Field(default=5050)
    log_level: str = Field(default="INFO")

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
