"""Test doubles for the readme_synth ports.

The fakes implement the domain ports (``RepoHost``, ``GenerationTransport``)
and the synthesizer's ``TextGenerator`` protocol so services can be tested
without network access.  Async code is driven with ``asyncio.run``.
"""

from __future__ import annotations

import asyncio
from typing import Callable

from readme_synth.domain.entities import AttemptOutcome, GenerationRequest, TreeEntry
from readme_synth.domain.exceptions import ContentExtractionError
from readme_synth.domain.value_objects import Credential, RepositoryIdentity

SAMPLE_PACKAGE_JSON = """{
  "name": "sample-project",
  "version": "1.0.0",
  "description": "An example Node.js project for AI documentation generation",
  "main": "index.js",
  "scripts": {
    "start": "node index.js",
    "dev": "nodemon index.js",
    "test": "jest"
  },
  "dependencies": {
    "express": "^4.18.2",
    "mongoose": "^7.5.0"
  }
}"""

SAMPLE_APP_JS = """const express = require('express');
const app = express();
const PORT = process.env.PORT || 3000;

// Middleware
app.use(express.json());

// Routes
app.get('/api/health', (req, res) => {
  res.json({ status: 'OK', message: 'Sample API working' });
});

app.listen(PORT, () => {
  console.log(`Server running on port ${PORT}`);
});

module.exports = app;"""

AUTODOC_MARKDOWN = """# Sample Project

## Project Overview

A small web server that answers health checks.

## How It Works

The server starts and waits for requests.

## Frontend

There is no frontend in this project.

## Backend

An Express server exposes `/api/health`.

## Technologies Used

- Express: a web framework for Node.js.
- Mongoose: a library for talking to MongoDB.

## How to Run Locally

1. Install Node.js.
2. Run `npm install`.
3. Run `npm start`.

## Why This Project Is Useful

It shows how a minimal API is put together.
"""


class FakeRepoHost:
    """In-memory ``RepoHost`` that records calls and concurrency."""

    def __init__(
        self,
        tree: list[TreeEntry] | None = None,
        contents: dict[str, str | Exception] | None = None,
        *,
        exists: bool = True,
        tree_error: Exception | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.tree = tree or []
        self.contents = contents or {}
        self.exists = exists
        self.tree_error = tree_error
        self.delays = delays or {}
        self.events: list[tuple[str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.exists_calls = 0

    async def repository_exists(self, identity: RepositoryIdentity) -> bool:
        self.exists_calls += 1
        return self.exists

    async def fetch_tree(self, identity: RepositoryIdentity) -> list[TreeEntry]:
        if self.tree_error is not None:
            raise self.tree_error
        return list(self.tree)

    async def fetch_file_content(self, identity: RepositoryIdentity, path: str) -> str:
        self.events.append(("start", path))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(path, 0))
            value = self.contents.get(path)
            if isinstance(value, Exception):
                raise value
            if value is None:
                raise ContentExtractionError(f"File not found: {path}")
            return value
        finally:
            self.in_flight -= 1
            self.events.append(("end", path))

    @property
    def requested(self) -> list[str]:
        return [path for kind, path in self.events if kind == "start"]


class ScriptedTransport:
    """``GenerationTransport`` returning a fixed outcome per credential source."""

    def __init__(self, outcomes: dict[str, AttemptOutcome]) -> None:
        self.outcomes = outcomes
        self.calls: list[tuple[str, GenerationRequest]] = []

    async def attempt(
        self, credential: Credential, request: GenerationRequest
    ) -> AttemptOutcome:
        self.calls.append((credential.source, request))
        return self.outcomes[credential.source]

    @property
    def sources_tried(self) -> list[str]:
        return [source for source, _ in self.calls]


class StubGenerator:
    """Deterministic ``TextGenerator`` that records every request."""

    def __init__(self, reply: str | Callable[[GenerationRequest], str] = "") -> None:
        self.reply = reply
        self.requests: list[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        if callable(self.reply):
            return self.reply(request)
        return self.reply


def blob(path: str, size: int | None = 10) -> TreeEntry:
    return TreeEntry(path=path, type="blob", size=size)
