from __future__ import annotations

from typing import Any, Callable

import google_auth_httplib2
import httplib2
from googleapiclient.http import HttpRequest


def authorized_http(creds) -> google_auth_httplib2.AuthorizedHttp:
    """A fresh authorized transport; httplib2.Http objects are not thread-safe."""
    return google_auth_httplib2.AuthorizedHttp(creds, http=httplib2.Http())


def request_builder(creds) -> Callable[..., HttpRequest]:
    """requestBuilder for build() giving every request its own transport.

    Services built with it can be shared by worker threads.
    """

    def build_request(http: Any, *args: Any, **kwargs: Any) -> HttpRequest:
        return HttpRequest(authorized_http(creds), *args, **kwargs)

    return build_request
