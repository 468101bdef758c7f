"""SkyDeal pipeline - upstream offer mappers and result-set processing."""

from skydeal_pipeline.amadeus.response_parser import AmadeusOfferMapper
from skydeal_pipeline.base import BaseOfferMapper, OfferMappingError
from skydeal_pipeline.duffel.response_parser import DuffelOfferMapper
from skydeal_pipeline.mappers import get_mapper
from skydeal_pipeline.pipeline.result_set import ResultSetPipeline

__all__ = [
    "AmadeusOfferMapper",
    "BaseOfferMapper",
    "DuffelOfferMapper",
    "OfferMappingError",
    "ResultSetPipeline",
    "get_mapper",
]
