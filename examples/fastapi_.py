# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "cachepolicy[fastapi]",
#     "httpx",
# ]
#
# [tool.uv.sources]
# cachepolicy = { path = "../", editable = true }
# ///


import asyncio

import httpx
from fastapi import FastAPI

from cachepolicy import public, secure
from cachepolicy.fastapi import cache

app = FastAPI()


@app.get("/items/", dependencies=[cache(public("5m"))])
async def read_items():
    return {"items": ["a", "b"]}


@app.get("/account/", dependencies=[cache(secure())])
async def read_account():
    return {"name": "John"}


async def main():
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app)) as client:
        for path in ("/items/", "/account/"):
            response = await client.get(f"http://testserver{path}")
            print(f"{path:<10} Cache-Control: {response.headers['cache-control']}")
            print(f"{'':<10} Pragma: {response.headers.get('pragma', '-')}")


if __name__ == "__main__":
    asyncio.run(main())
