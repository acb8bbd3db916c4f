from ffecho.core.http.abc import HttpClient, HttpResponse
from ffecho.core.http.real import RealHttpClient

__all__ = ["HttpClient", "HttpResponse", "RealHttpClient"]
