"""Upstream call interception and failure classification."""

from upstreamguard.interceptor.base import (
    ChainedInterceptor,
    PassThroughInterceptor,
    UpstreamInterceptor,
)
from upstreamguard.interceptor.call import UpstreamCall
from upstreamguard.interceptor.client import UpstreamClient
from upstreamguard.interceptor.error_interceptor import UpstreamErrorInterceptor

__all__ = [
    "ChainedInterceptor",
    "PassThroughInterceptor",
    "UpstreamCall",
    "UpstreamClient",
    "UpstreamErrorInterceptor",
    "UpstreamInterceptor",
]
