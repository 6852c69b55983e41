"""
wortschatz API server.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from wortschatz.server.deps import get_dictionary
from wortschatz.server.routes import passwords, words


def print_routes(app: FastAPI):
    print("\n" + "=" * 60)
    print("wortschatz API Routes")
    print("=" * 60)

    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        print(f"  {methods:8} {path:40} → {name}")

    print("=" * 60 + "\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    print_routes(app)
    await get_dictionary()
    yield


app = FastAPI(title="wortschatz API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(words.router)
app.include_router(passwords.router)
