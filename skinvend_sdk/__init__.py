"""Python client for the SkinVend skin marketplace API."""
from .canonical import canonicalize
from .client import SkinVend
from .config import ClientConfig
from .deposits import Deposits, OfferWorkflow
from .errors import (
    ConfigurationError,
    NoResponseError,
    ServerError,
    SkinVendSDKError,
    TransportError,
)
from .http import HttpClient
from .market import Market
from .project import Project
from .signers import HmacSha512Signer, RequestSigner, compute_signature
from .types import OfferResult, OfferStatus, OfferStep, SignedEnvelope
from .withdrawals import Withdrawals

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "Deposits",
    "HmacSha512Signer",
    "HttpClient",
    "Market",
    "NoResponseError",
    "OfferResult",
    "OfferStatus",
    "OfferStep",
    "OfferWorkflow",
    "Project",
    "RequestSigner",
    "ServerError",
    "SignedEnvelope",
    "SkinVend",
    "SkinVendSDKError",
    "TransportError",
    "Withdrawals",
    "canonicalize",
    "compute_signature",
]
