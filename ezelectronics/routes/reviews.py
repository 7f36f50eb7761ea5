# ezelectronics/routes/reviews.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ezelectronics.controllers import reviews as controller
from ezelectronics.db.database import get_db
from ezelectronics.db.models import User
from ezelectronics.db.schemas import ReviewCreate, ReviewSchema
from ezelectronics.dependencies import get_current_user, is_customer, is_admin_or_manager

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("/{model}")
async def add_review(model: str, body: ReviewCreate, user: User = Depends(is_customer),
                     db: AsyncSession = Depends(get_db)):
    await controller.add_review(db, model, user, body.score, body.comment)


@router.get("/{model}", response_model=List[ReviewSchema])
async def get_product_reviews(model: str, user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    return await controller.get_product_reviews(db, model)


@router.delete("/{model}/all")
async def delete_reviews_of_product(model: str, user: User = Depends(is_admin_or_manager),
                                    db: AsyncSession = Depends(get_db)):
    await controller.delete_reviews_of_product(db, model)


@router.delete("/{model}")
async def delete_review(model: str, user: User = Depends(is_customer), db: AsyncSession = Depends(get_db)):
    await controller.delete_review(db, model, user)


@router.delete("")
async def delete_all_reviews(user: User = Depends(is_admin_or_manager), db: AsyncSession = Depends(get_db)):
    await controller.delete_all_reviews(db)
