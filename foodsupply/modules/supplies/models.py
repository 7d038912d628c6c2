# MongoDB collection: supplies
# This file documents the expected document shape
# Actual operations are handled via pymongo in service.py

"""
Expected document structure:
- _id: ObjectId (primary key)
- supplyImg: image URL
- supplyTitle: display title
- supplyCategory: category label
- supplyQuantity: quantity (number or free text)
- supplyDesc: description

Documents are stored exactly as submitted, so extra keys may be present.
Updates only ever touch the five editable fields above.
"""

SUPPLIES_COLLECTION = "supplies"

EDITABLE_FIELDS = (
    "supplyImg",
    "supplyTitle",
    "supplyCategory",
    "supplyQuantity",
    "supplyDesc",
)
