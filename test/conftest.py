import pathlib
from typing import List

import yaml
import pytest

from lenient_bool.utils.logger.config import LogEvent
from lenient_bool.utils.logger.handlers.base import BaseLogHandler


class CollectingHandler(BaseLogHandler):
    def __init__(self):
        super().__init__()
        self.batches: List[List[LogEvent]] = []

    async def push(self, records: List[LogEvent]) -> None:
        self.batches.append(list(records))

    @property
    def events(self) -> List[LogEvent]:
        return [ev for batch in self.batches for ev in batch]


@pytest.fixture(scope="session")
def token_cases():
    config_path = pathlib.Path(__file__).parent / "fixtures" / "tokens.yaml"
    with config_path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def collecting_handler() -> CollectingHandler:
    return CollectingHandler()
