from dataclasses import dataclass
from enum import Enum


class DocumentType(str, Enum):
    """Kind of legal filing. Unknown documents are represented by None."""

    CEDULA = "CEDULA"
    OFICIO = "OFICIO"


@dataclass(frozen=True)
class ExpedienteRef:
    """Docket reference `<numero>/<anio>` as printed on the filing."""

    numero: str
    anio: int

    @property
    def expediente(self) -> str:
        return f"{self.numero}/{self.anio}"
