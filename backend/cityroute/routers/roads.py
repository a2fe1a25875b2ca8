"""Road endpoints.

Roads are undirected: a road from A to B can be travelled both ways at the
same distance. Adding a second road between the same two cities keeps both.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from cityroute.core.graph.exceptions import InvalidRoadError, UnknownCityError
from cityroute.core.graph.network import CityNetwork, get_network

router = APIRouter()


# -------------------- Schemas -------------------- #

class RoadCreate(BaseModel):
    from_id: int = Field(..., description="ID of the first city")
    to_id: int = Field(..., description="ID of the second city")
    # Free text from the distance input box; unusable values fall back to the default
    distance: Optional[Union[float, str]] = Field(None, description="Road length in miles")


class RoadOut(BaseModel):
    from_id: int
    to_id: int
    distance: float

    model_config = ConfigDict(from_attributes=True)


# -------------------- Health Check -------------------- #

@router.get("/roads/health")
def roads_health_check():
    return {"status": "roads router ready"}


# -------------------- Road Endpoints -------------------- #

@router.get("/roads", response_model=List[RoadOut])
def list_roads(network: CityNetwork = Depends(get_network)):
    return network.roads()


@router.post("/roads", response_model=RoadOut, status_code=201)
def add_road(payload: RoadCreate, network: CityNetwork = Depends(get_network)):
    """Connect two existing cities with a new road."""
    try:
        return network.add_road(payload.from_id, payload.to_id, payload.distance)
    except UnknownCityError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidRoadError as e:
        raise HTTPException(status_code=400, detail=str(e))
