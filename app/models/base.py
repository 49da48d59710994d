from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Common shape of every stored entity.

    Records are frozen and sequence fields are stored as tuples.  The
    store replaces a record wholesale on update, so a record handed out
    to a caller keeps its values.  Mapping fields such as a saved
    search's ``filters`` are plain dicts and are read-only by convention.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: int
    created_at: datetime
