from pydantic import BaseModel


class OddsConversionResponse(BaseModel):
    american: str
    decimal: float
