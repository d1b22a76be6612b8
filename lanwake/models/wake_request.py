from pydantic import BaseModel, ConfigDict, Field
from lanwake.models.destination import DestinationModel

class WakeRequestModel(BaseModel):
    mac: str
    password: str | None = Field(default=None, repr=False)
    destination: DestinationModel = DestinationModel()

    model_config = ConfigDict(extra='forbid')
