"""Client-side hierarchy features and capability negotiation."""

from lsphierarchy.client.callhierarchy import CallHierarchyFeature, CallHierarchyType
from lsphierarchy.client.connection import LanguageClient
from lsphierarchy.client.feature import FeatureState, HierarchyFeature
from lsphierarchy.client.negotiation import (
    CapabilityNegotiator,
    Negotiated,
    NegotiationOutcome,
    Skipped,
    Unsupported,
)
from lsphierarchy.client.typehierarchy import TypeHierarchyFeature, TypeHierarchyType

__all__ = [
    "CallHierarchyFeature",
    "CallHierarchyType",
    "CapabilityNegotiator",
    "FeatureState",
    "HierarchyFeature",
    "LanguageClient",
    "Negotiated",
    "NegotiationOutcome",
    "Skipped",
    "TypeHierarchyFeature",
    "TypeHierarchyType",
    "Unsupported",
]
