"""CORS handling with a set of paths that stay open to every origin."""

from collections.abc import Iterable, Sequence

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class PublicPathCORSMiddleware(CORSMiddleware):
    """
    ``CORSMiddleware`` for ``allow_origins``, except on ``public_paths``.

    Requests to a public path, preflights included, are answered with
    ``Access-Control-Allow-Origin: *`` whatever the configured origins are.
    """

    def __init__(
        self,
        app: ASGIApp,
        public_paths: Iterable[str] = (),
        allow_origins: Sequence[str] = (),
        allow_methods: Sequence[str] = ("GET",),
        allow_headers: Sequence[str] = (),
    ) -> None:
        super().__init__(
            app,
            allow_origins=allow_origins,
            allow_methods=allow_methods,
            allow_headers=allow_headers,
        )
        self._public_paths = frozenset(public_paths)
        self._public = CORSMiddleware(
            app,
            allow_origins=["*"],
            allow_methods=allow_methods,
            allow_headers=allow_headers,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"] in self._public_paths:
            await self._public(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
