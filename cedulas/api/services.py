from dataclasses import dataclass

from cedulas.config.settings import Settings
from cedulas.documents.storage_loader import StorageLoader, build_storage_loader
from cedulas.processor.processor import (
    Processor,
    build_caratula_processor,
    build_expediente_processor,
    build_juzgado_processor,
    build_type_processor,
)
from cedulas.proxy.client import PdfExtractorClient


@dataclass
class Services:
    """Collaborators shared by the API routes, built once per app."""

    type_processor: Processor
    caratula_processor: Processor
    juzgado_processor: Processor
    expediente_processor: Processor
    storage_loader: StorageLoader
    pdf_extractor_client: PdfExtractorClient


def build_services(settings: Settings) -> Services:
    return Services(
        type_processor=build_type_processor(settings),
        caratula_processor=build_caratula_processor(settings),
        juzgado_processor=build_juzgado_processor(settings),
        expediente_processor=build_expediente_processor(settings),
        storage_loader=build_storage_loader(settings),
        pdf_extractor_client=PdfExtractorClient(
            url=settings.pdf_extractor_url,
            timeout_seconds=settings.pdf_extractor_timeout_seconds,
        ),
    )
