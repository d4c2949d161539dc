from __future__ import annotations

from typing import List, Optional

import pytest

from canalflow.ingest.builder import build_record

HEADER = "segment,object_code,object_name,country,parameter,date,value,source_file"


class StubResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.content = text.encode("utf-8")
        self.text = text
        self.status_code = status_code
        self.ok = status_code < 400


class StubSession:
    """Stands in for ``requests.Session`` and records requested URLs."""

    def __init__(self, response: Optional[StubResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[str] = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.response


def make_record(
    date: str = "2020-04-01",
    value: float = 10.0,
    object_code: str = "LNK",
    country: str = "Uzbekistan",
    segment: str = "Upper",
    object_name: str = "Left Bank Canal",
    source_file: str = "report.xlsx",
):
    fields = [segment, object_code, object_name, country, "discharge", date, str(value), source_file]
    return build_record(fields)


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def feed_text() -> str:
    lines = [
        HEADER,
        "Upper,LNK,Left Bank Canal,Uzbekistan,discharge,2020-04-01,30,апрель 2020.xlsx",
        "Upper,LNK,Left Bank Canal,Uzbekistan,discharge,2020-04-02,40,апрель 2020.xlsx",
        "Upper,LNK,Left Bank Canal,Uzbekistan,discharge,2020-10-01,10,октябрь 2020.xlsx",
        'Middle,BNK,"Big Canal, north",Kazakhstan,discharge,2021-05-03,20.5,май 2021.xlsx',
        "",
    ]
    return "\n".join(lines)
