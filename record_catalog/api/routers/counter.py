from fastapi import APIRouter, Depends

from record_catalog.core.counter import RequestCounter, get_counter

router = APIRouter()

@router.get("", response_model=int)
def count_request(counter: RequestCounter = Depends(get_counter)):
    counter.increment()
    return counter.read()
