"""City and whole-network endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from cityroute.core.graph.network import CityNetwork, get_network
from cityroute.routers.roads import RoadOut


router = APIRouter()


# -------------------- Schemas -------------------- #

class CityCreate(BaseModel):
    name: Optional[str] = Field(None, description="Display name; defaults to 'City <id>'")
    x: float = Field(..., description="Horizontal position on the map (0-100)")
    y: float = Field(..., description="Vertical position on the map (0-100)")


class CityOut(BaseModel):
    id: int
    name: str
    x: float
    y: float

    model_config = ConfigDict(from_attributes=True)


class NetworkOut(BaseModel):
    cities: List[CityOut]
    roads: List[RoadOut]


# -------------------- Endpoints -------------------- #

@router.get("/cities", response_model=List[CityOut])
def list_cities(network: CityNetwork = Depends(get_network)):
    return network.cities()


@router.post("/cities", response_model=CityOut, status_code=201)
def add_city(payload: CityCreate, network: CityNetwork = Depends(get_network)):
    return network.add_city(name=payload.name, x=payload.x, y=payload.y)


@router.get("/network", response_model=NetworkOut)
def get_whole_network(network: CityNetwork = Depends(get_network)):
    cities, roads = network.snapshot()
    return NetworkOut(
        cities=[CityOut.model_validate(c) for c in cities],
        roads=[RoadOut.model_validate(r) for r in roads],
    )


@router.post("/network/reset", response_model=NetworkOut)
def reset_network(network: CityNetwork = Depends(get_network)):
    """Discard added cities and roads and restore the sample network."""
    network.reset()
    return get_whole_network(network)
