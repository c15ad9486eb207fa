from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import List, Optional
import logging
import os
from contextlib import asynccontextmanager

# Local imports
from store import BookingStore, ClassNotFoundError
from seed_data import seed_classes
from models import BookingOut, BookingRequest, ClassOut, ClassRequest, ErrorOut
from utils import InvalidDateError, format_date, parse_date

# ---------- Config ----------
HOST = "127.0.0.1"
PORT = 10000
SEED_DEMO_CLASSES = os.getenv("SEED_DEMO_CLASSES", "").lower() in ("1", "true", "yes")

InvalidJSON = "JSON parse error"
InternalError = "Internal error please try again"
InvalidDate = "Could not parse date, format should be YYYY-MM-DD"
ClassDoesNotExists = "Requested class does not exist"

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("booking_api")

# ---------- App Lifecycle ----------
@asynccontextmanager
async def lifespan(app: FastAPI):
    if SEED_DEMO_CLASSES:
        seed_classes(app.state.store)
        logger.info("Demo classes seeded.")
    logger.info("Booking API started.")
    yield
    logger.info("Application shutting down.")


def get_store(request: Request) -> BookingStore:
    return request.app.state.store


# ---------- Error Responses ----------
def error_response(reason: str, status_code: int, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorOut(error=reason).model_dump(), headers=headers)


def register_error_handlers(app: FastAPI):
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(str(exc.detail), exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return error_response(InvalidJSON, 400)


# ---------- Core Logic ----------
def process_create_classes(store: BookingStore, req: ClassRequest) -> List[ClassOut]:
    # Both bounds are parsed before anything is created
    try:
        start_date = parse_date(req.start_date)
        end_date = parse_date(req.end_date)
    except InvalidDateError as e:
        logger.warning("Create class rejected: %s", e)
        raise HTTPException(status_code=400, detail=InvalidDate)

    classes = store.create_classes(req.name, start_date, end_date, req.capacity)
    return [class_out(c) for c in classes]


def process_booking(store: BookingStore, req: BookingRequest) -> BookingOut:
    try:
        date = parse_date(req.date)
    except InvalidDateError as e:
        logger.warning("Booking rejected: %s", e)
        raise HTTPException(status_code=400, detail=InvalidDate)

    try:
        booking = store.create_booking(req.member_name, req.class_name, date)
    except ClassNotFoundError as e:
        logger.warning("Booking rejected: %s", e)
        raise HTTPException(status_code=404, detail=ClassDoesNotExists)

    return BookingOut(id=booking.id, **req.model_dump())


def class_out(cls) -> ClassOut:
    return ClassOut(id=cls.id, name=cls.name, date=format_date(cls.date), capacity=cls.capacity)


# ---------- API Endpoints ----------
router = APIRouter()


@router.post("/classes", status_code=201, response_model=List[ClassOut])
def create_classes_api(req: ClassRequest, store: BookingStore = Depends(get_store)):
    return process_create_classes(store, req)


@router.get("/classes", response_model=List[ClassOut])
def list_classes_api(store: BookingStore = Depends(get_store)):
    try:
        return [class_out(c) for c in store.list_classes()]
    except (TypeError, ValueError, AttributeError):
        logger.exception("Could not serialize class list")
        raise HTTPException(status_code=500, detail=InternalError)


@router.post("/bookings", status_code=201, response_model=BookingOut)
def create_booking_api(req: BookingRequest, store: BookingStore = Depends(get_store)):
    return process_booking(store, req)


def create_app(store: Optional[BookingStore] = None) -> FastAPI:
    app = FastAPI(title="Class Booking API", lifespan=lifespan)
    app.state.store = store if store is not None else BookingStore()
    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()


# ---------- Run ----------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=HOST, port=PORT)
