from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "CHANNELOP_", "env_file": ".env", "extra": "ignore"}

    # Slack (reads SLACK_API_TOKEN, not CHANNELOP_SLACK_API_TOKEN)
    slack_api_token: str = Field(default="", validation_alias="SLACK_API_TOKEN")

    # Pagination
    channel_page_size: int = Field(default=200, gt=0)
    member_page_size: int = Field(default=1000, gt=0)

    log_level: str = "INFO"


settings = Settings()
