from pydantic import BaseModel
from typing import Any, Dict, Optional


class SupplyUpdate(BaseModel):
    supplyImg: Optional[Any] = None
    supplyTitle: Optional[Any] = None
    supplyCategory: Optional[Any] = None
    supplyQuantity: Optional[Any] = None
    supplyDesc: Optional[Any] = None

    def to_set_document(self) -> Dict[str, Any]:
        # every editable field is written, absent ones as null
        return self.model_dump()
