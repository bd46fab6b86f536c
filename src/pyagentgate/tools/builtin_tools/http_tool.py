from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any

from ..base import ActionCategory, ParamSpec, ToolContext, ToolResult, ToolSpec

METHODS = ("GET", "POST", "PUT", "DELETE")
USER_AGENT = "pyagentgate/0.1"


def _decode(raw: bytes, charset: str | None) -> str:
    # Best-effort decode
    for enc in (charset, "utf-8", "latin-1"):
        if not enc:
            continue
        try:
            return raw.decode(enc)
        except (LookupError, UnicodeDecodeError):
            continue
    return raw.decode("utf-8", errors="replace")


def _parse_body(raw: bytes, content_type: str, charset: str | None) -> Any:
    text = _decode(raw, charset)
    if "json" in content_type:
        try:
            return json.loads(text)
        except ValueError:
            return text
    return text


class HttpRequestTool:
    """Issue one HTTP request and hand back status plus body.

    JSON responses are parsed; anything else comes back as text. Error
    statuses and transport failures are errors; nothing is retried.
    """

    spec = ToolSpec(
        name="http_request",
        description="Make an HTTP request",
        category=ActionCategory.NETWORK,
        parameters={
            "url": ParamSpec("string", required=True, description="URL to request"),
            "method": ParamSpec("string", enum=METHODS, description="HTTP method", default="GET"),
            "headers": ParamSpec("object", description="Request headers"),
            "data": ParamSpec("object", description="Request body data"),
        },
    )

    def describe(self, ctx: ToolContext, args: dict[str, Any]) -> tuple[str, str]:
        return "Make HTTP request", f"{args.get('method') or 'GET'} {args['url']}"

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        url = args["url"].strip()
        if not url:
            return ToolResult.error("Missing required field: url")
        method = args.get("method") or "GET"
        headers = {"User-Agent": USER_AGENT}
        headers.update({str(k): str(v) for k, v in (args.get("headers") or {}).items()})

        body: bytes | None = None
        if args.get("data") is not None:
            body = json.dumps(args["data"], ensure_ascii=False).encode("utf-8")
            if not any(k.lower() == "content-type" for k in headers):
                headers["Content-Type"] = "application/json"

        try:
            req = urllib.request.Request(url, data=body, headers=headers, method=method)
            with urllib.request.urlopen(req) as resp:
                raw = resp.read()
                status = resp.status
                content_type = (resp.headers.get("Content-Type") or "").lower()
                charset = resp.headers.get_content_charset()
        except urllib.error.HTTPError as e:
            return ToolResult.error(f"Request failed with status code {e.code}: {e.reason}")
        except urllib.error.URLError as e:
            return ToolResult.error(f"Request failed: {e.reason}")
        except ValueError as e:
            # malformed URL
            return ToolResult.error(f"Request failed: {e}")

        return ToolResult.success({"status": status, "data": _parse_body(raw, content_type, charset)})
