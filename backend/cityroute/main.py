from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cityroute.core.config import CORS_ORIGINS, configure_logging
from cityroute.routers import cities, roads, routing

configure_logging()

app = FastAPI(title="City Route Planner")

# Allow the map frontend (Vite dev server) to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(cities.router, tags=["Cities"])
app.include_router(roads.router, tags=["Roads"])
app.include_router(routing.router, prefix="/route", tags=["Route"])


@app.get("/")
def root():
    return {"message": "City Route Planner backend running!"}
