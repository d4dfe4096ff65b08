from fastapi import APIRouter
from app.api.v1.routes.system import router as system_router
from app.api.v1.routes.occasion import router as occasion_router
from app.api.v1.routes.person import router as person_router
from app.api.v1.routes.subgroup import router as subgroup_router
from app.api.v1.routes.expense import router as expense_router
from app.api.v1.routes.settlement import router as settlement_router

api_router = APIRouter()

api_router.include_router(system_router, prefix="/system", tags=["system"])
api_router.include_router(occasion_router, prefix="/occasions", tags=["occasions"])
api_router.include_router(person_router, tags=["people"])
api_router.include_router(subgroup_router, tags=["subgroups"])
api_router.include_router(expense_router, tags=["expenses"])
api_router.include_router(settlement_router, tags=["settlements"])
