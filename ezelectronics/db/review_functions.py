# ezelectronics/db/review_functions.py
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import delete

from ezelectronics.db.models import Review
from ezelectronics.db.product_functions import get_product_by_model
from ezelectronics.errors import ExistingReviewError, NoReviewProductError
from ezelectronics.logger import get_logger

_logger = get_logger(__name__)


async def _find_review(db: AsyncSession, model: str, username: str):
    result = await db.execute(select(Review).filter(Review.model == model, Review.username == username))
    return result.scalar_one_or_none()


async def add_review(db: AsyncSession, model: str, username: str, score: int, comment: str):
    await get_product_by_model(db, model)
    if await _find_review(db, model, username):
        raise ExistingReviewError()

    db.add(Review(model=model, username=username, score=score, date=date.today(), comment=comment))
    await db.commit()
    _logger.info(f"{username} reviewed {model} with score {score}")


async def get_product_reviews(db: AsyncSession, model: str):
    await get_product_by_model(db, model)
    result = await db.execute(select(Review).filter(Review.model == model).order_by(Review.date, Review.username))
    return result.scalars().all()


async def delete_review(db: AsyncSession, model: str, username: str):
    await get_product_by_model(db, model)
    review = await _find_review(db, model, username)
    if not review:
        raise NoReviewProductError()

    await db.delete(review)
    await db.commit()
    _logger.info(f"Deleted review of {username} on {model}")


async def delete_reviews_of_product(db: AsyncSession, model: str):
    await get_product_by_model(db, model)
    await db.execute(delete(Review).where(Review.model == model))
    await db.commit()
    _logger.info(f"Deleted all reviews of {model}")


async def delete_all_reviews(db: AsyncSession):
    await db.execute(delete(Review))
    await db.commit()
    _logger.info("Deleted all reviews")
