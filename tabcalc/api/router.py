"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from tabcalc.api.psychrometrics import router as psychrometrics_router
from tabcalc.api.airflow import router as airflow_router
from tabcalc.api.fan_affinity import router as fan_affinity_router
from tabcalc.api.filter import router as filter_router
from tabcalc.api.duct import router as duct_router
from tabcalc.api.stats import router as stats_router

router = APIRouter()
router.include_router(psychrometrics_router)
router.include_router(airflow_router)
router.include_router(fan_affinity_router)
router.include_router(filter_router)
router.include_router(duct_router)
router.include_router(stats_router)
