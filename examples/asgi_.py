# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "cachepolicy",
#     "httpx",
# ]
#
# [tool.uv.sources]
# cachepolicy = { path = "../", editable = true }
# ///


import asyncio

import httpx

from cachepolicy import disable
from cachepolicy.asgi import CacheControlMiddleware


async def app(scope, receive, send):
    await send(
        {
            "type": "http.response.start",
            "status": 200,
            "headers": [(b"content-type", b"text/plain"), (b"cache-control", b"public, max-age=86400")],
        }
    )
    await send({"type": "http.response.body", "body": b"Hello, World!"})


async def main():
    transport = httpx.ASGITransport(app=CacheControlMiddleware(app, policy=disable()))
    async with httpx.AsyncClient(transport=transport) as client:
        response = await client.get("http://testserver/")
        print(f"Cache-Control: {response.headers['cache-control']}")
        print(f"Pragma: {response.headers['pragma']}")


if __name__ == "__main__":
    asyncio.run(main())
