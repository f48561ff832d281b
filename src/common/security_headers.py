from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class SecurityHeadersMiddleware:
    """Add security headers to HTTP responses.

    Headers already set by a route are left untouched and blank values are
    skipped.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        x_content_type_options: str = "",
        x_frame_options: str = "",
        referrer_policy: str = "",
        x_dns_prefetch_control: str = "",
    ) -> None:
        self.app = app
        self.headers = {
            name: value
            for name, value in (
                ("x-content-type-options", x_content_type_options),
                ("x-frame-options", x_frame_options),
                ("referrer-policy", referrer_policy),
                ("x-dns-prefetch-control", x_dns_prefetch_control),
            )
            if value.strip()
        }

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not self.headers:
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in self.headers.items():
                    if name not in headers:
                        headers.append(name, value)
            await send(message)

        await self.app(scope, receive, send_with_headers)
