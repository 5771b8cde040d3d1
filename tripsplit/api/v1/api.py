from fastapi import APIRouter
from tripsplit.api.v1.endpoints import trips, expenses, settlements, compute

api_router = APIRouter()

api_router.include_router(trips.router, prefix="/trips", tags=["trips"])
api_router.include_router(expenses.router, tags=["expenses"])
api_router.include_router(settlements.router, tags=["settlements"])
api_router.include_router(compute.router, prefix="/compute", tags=["compute"])
