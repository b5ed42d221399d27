"""
Pydantic models for the split API.
"""

from pydantic import BaseModel, field_validator
from typing import Any, List, Optional

from autosplit.services.parser import Record
from autosplit.services.pipeline import ParseResult, SplitResult
from autosplit.services.settlement import PayFromTo
from autosplit.services.summary import describe_directive
from autosplit.utils.money import format_money, parse_amount, parse_distance


class RecordModel(BaseModel):
    """A single name/kilometre row."""
    name: str = ""
    distance: int = 0

    @field_validator("distance", mode="before")
    @classmethod
    def coerce_distance(cls, v: Any) -> int:
        """Invalid, negative or non-finite distances count as 0."""
        return parse_distance(v)

    def to_record(self) -> Record:
        return Record(name=self.name, distance=self.distance)

    @classmethod
    def from_record(cls, record: Record) -> "RecordModel":
        return cls(name=record.name, distance=record.distance)


class ParseRequest(BaseModel):
    text: str = ""


class ParseResponse(BaseModel):
    status: str
    message: str
    records: List[RecordModel]

    @classmethod
    def from_result(cls, result: ParseResult) -> "ParseResponse":
        return cls(
            status=result.status.value,
            message=result.message,
            records=[RecordModel.from_record(r) for r in result.records],
        )


class SplitRequest(BaseModel):
    records: List[RecordModel] = []
    amount: float = 0.0

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> float:
        return parse_amount(v)


class ShareModel(BaseModel):
    name: str
    distance: int
    percentage: float
    amount: float
    amount_display: str  # "€25.00", for tables and cards


class DirectiveModel(BaseModel):
    kind: str
    sentence: str
    payer: Optional[str] = None
    payee: Optional[str] = None
    amount: Optional[float] = None


class SplitResponse(BaseModel):
    total_amount: float
    total_distance: int
    total_distance_label: str
    shares: List[ShareModel]
    directive: DirectiveModel
    summary: str

    @classmethod
    def from_result(cls, result: SplitResult) -> "SplitResponse":
        directive = result.directive
        directive_model = DirectiveModel(kind=directive.kind, sentence=describe_directive(directive))
        if isinstance(directive, PayFromTo):
            directive_model.payer = directive.payer
            directive_model.payee = directive.payee
            directive_model.amount = directive.amount

        return cls(
            total_amount=result.total_amount,
            total_distance=result.total_distance,
            total_distance_label=result.total_distance_label,
            shares=[
                ShareModel(
                    name=s.name,
                    distance=s.distance,
                    percentage=s.percentage,
                    amount=s.amount,
                    amount_display=format_money(s.amount),
                )
                for s in result.shares
            ],
            directive=directive_model,
            summary=result.summary,
        )


class PlaceholderRequest(BaseModel):
    records: List[RecordModel] = []


class OCRResponse(BaseModel):
    """Model for OCR upload responses."""
    text: str
    parse: ParseResponse
    split: Optional[SplitResponse] = None
