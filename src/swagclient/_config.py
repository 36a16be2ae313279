from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from ._utils.constants import ENV_BASE_URL


class Config(BaseModel):
    base_url: str = ""

    @classmethod
    def from_env(cls, base_url: Optional[str] = None) -> "Config":
        """Build the config, falling back to ``SWAGCLIENT_BASE_URL``.

        A ``.env`` file in the working directory is loaded first.
        """
        load_dotenv()
        return cls(base_url=base_url or env.get(ENV_BASE_URL) or "")
