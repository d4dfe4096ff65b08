from decimal import Decimal
from typing import Annotated
from pydantic import PlainSerializer
from app.core.utils import qround

# money leaves the API as a 2-decimal string, e.g. "20.00"
Money = Annotated[Decimal, PlainSerializer(lambda v: str(qround(v)), return_type=str)]
