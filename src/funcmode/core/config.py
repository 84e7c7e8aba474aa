import os

from pydantic import BaseModel, Field

from funcmode.core.enums import DuplicateMode


class Settings(BaseModel):
    DUPLICATE_MODE: DuplicateMode = Field(
        DuplicateMode.DEEP,
        description="Copy strategy used by move-tested adapters when no duplicator is given.",
    )

    @classmethod
    def load(cls) -> "Settings":
        duplicate_mode = os.getenv("FUNCMODE_DUPLICATE_MODE")

        if duplicate_mode is None:
            return cls()

        return cls(DUPLICATE_MODE=duplicate_mode.strip().lower())


settings = Settings.load()
