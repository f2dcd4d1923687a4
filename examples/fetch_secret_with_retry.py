"""
Example: Fetching a Secret with Retries

This example shows how a client call site combines the error taxonomy and
the retry presets. A mock transport stands in for the secrets server: it
fails twice with 503 before answering, so the example runs offline.
"""

import asyncio
import logging

import httpx

from secretkeep_sdk import errors as sdk_errors
from secretkeep_sdk.errors import ErrorMapper, ErrorResponse
from secretkeep_sdk.observability import RetryLogger, RetryMetrics, compose_notify
from secretkeep_sdk.reliability import (
    CancellationToken,
    do,
    forever,
    permanent,
    with_initial_interval,
    with_max_attempts,
    with_notify,
)


def make_transport(failures: int) -> httpx.MockTransport:
    """Mock server returning 503 ``failures`` times, then the secret."""
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        if calls["count"] <= failures:
            return httpx.Response(503, json={"err": "state_not_ready"})
        if request.url.path.endswith("/missing"):
            return httpx.Response(404, json={"err": "entity_not_found"})
        return httpx.Response(200, json={"data": {"password": "hunter2"}, "err": ""})

    return httpx.MockTransport(handler)


async def get_secret(client: httpx.AsyncClient, path: str) -> dict:
    """One attempt: map failures, give up at once on non-retryable ones."""
    try:
        response = await client.get(f"/v1/store/secrets/{path}")
        response.raise_for_status()
    except httpx.HTTPError as e:
        mapped = ErrorMapper.map_exception(e)
        if not ErrorMapper.is_retryable(mapped):
            raise permanent(mapped)
        raise mapped

    body = response.json()
    server_error = ErrorResponse(err=body.get("err")).to_error()
    if server_error is not None:
        raise permanent(server_error.clone())
    return body["data"]


async def example_do():
    """Retry with defaults; report each failed attempt."""
    print("=== do() with logging and metrics ===\n")

    metrics = RetryMetrics()
    notify = compose_notify(RetryLogger("example").notify_fn(), metrics.record_failed_attempt)

    async with httpx.AsyncClient(base_url="https://keeper.local", transport=make_transport(2)) as client:
        secret = await do(
            lambda: get_secret(client, "db/creds"),
            with_initial_interval(0.05),
            with_notify(notify),
        )

    print(f"Secret: {secret}")
    print(f"Failed attempts by code: {metrics.failed_attempts}\n")


async def example_permanent():
    """A 404 is not retried."""
    print("=== Permanent failure ===\n")

    async with httpx.AsyncClient(base_url="https://keeper.local", transport=make_transport(0)) as client:
        try:
            await do(lambda: get_secret(client, "missing"))
        except sdk_errors.StructuredError as e:
            print(f"Gave up: {e}")
            print(f"Not found: {sdk_errors.is_error(e, sdk_errors.ERR_API_NOT_FOUND)}\n")


async def example_max_attempts():
    """Poll a readiness check a bounded number of times."""
    print("=== with_max_attempts() ===\n")

    checks = iter([False, False, True])
    await with_max_attempts(5, lambda: next(checks), with_initial_interval(0.05))
    print("Server ready\n")


async def example_forever_with_token():
    """Retry without a time ceiling until the caller cancels."""
    print("=== forever() with a cancellation token ===\n")

    token = CancellationToken(timeout=0.3)
    async with httpx.AsyncClient(base_url="https://keeper.local", transport=make_transport(100)) as client:
        try:
            await forever(lambda: get_secret(client, "db/creds"), with_initial_interval(0.05), token=token)
        except sdk_errors.StructuredError as e:
            print(f"Stopped: {e.code}\n")


async def main():
    logging.basicConfig(level=logging.WARNING)
    await example_do()
    await example_permanent()
    await example_max_attempts()
    await example_forever_with_token()


if __name__ == "__main__":
    asyncio.run(main())
