"""Base model for rows returned by the hosted backend"""

from pydantic import BaseModel, ConfigDict

class RemoteRecord(BaseModel):
    """
    Transient, request-scoped copy of a remote row

    Columns the application does not know about are ignored so schema
    additions on the backend never break reads.
    """

    model_config = ConfigDict(extra="ignore", from_attributes=True)
