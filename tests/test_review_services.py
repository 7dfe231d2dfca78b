"""Tests of the review business rules below the HTTP layer."""
import pytest
from beanie import PydanticObjectId as ObjId
from pymongo.errors import DuplicateKeyError

from jammit.exceptions.gathering_exceptions import (
    GatheringNotFoundException,
    NotParticipatingException)
from jammit.exceptions.review_exceptions import (
    DuplicateReviewException,
    ReviewNotFoundException,
    ReviewNotOwnedException,
    SelfReviewException)
from jammit.exceptions.user_exceptions import UserNotFoundException
from jammit.models.review_models import CreateReviewRequest, ReviewModel
from jammit.services import review_services


def _request(reviewee, gathering, **flags) -> CreateReviewRequest:
    return CreateReviewRequest(
        reviewee_id=reviewee.doc.id if hasattr(reviewee, "doc") else reviewee,
        gathering_id=gathering.id if hasattr(gathering, "id") else gathering,
        content="Solid timing.",
        **flags)


async def test_create_review_stores_names_and_flags(make_user, make_gathering):
    alice = await make_user("alice")
    bob = await make_user("bob")
    gathering = await make_gathering(alice, members=[bob])

    review = await review_services.create_review(
        alice, _request(bob, gathering, is_helpful=True, is_good_learner=True))

    assert review.reviewer_nickname == "alice"
    assert review.reviewee_nickname == "bob"
    assert review.gathering_name == "Friday jam"
    assert review.is_helpful and review.is_good_learner
    assert not review.is_practice_helped
    assert await ReviewModel.find_all().count() == 1


async def test_self_review_is_rejected(make_user, make_gathering):
    alice = await make_user("alice")
    gathering = await make_gathering(alice)
    with pytest.raises(SelfReviewException) as exc_info:
        await review_services.create_review(alice, _request(alice, gathering))
    assert exc_info.value.status_code == 400


async def test_unknown_reviewee_and_gathering(make_user, make_gathering):
    alice = await make_user("alice")
    bob = await make_user("bob")
    gathering = await make_gathering(alice, members=[bob])

    with pytest.raises(UserNotFoundException):
        await review_services.create_review(alice, _request(ObjId(), gathering))
    with pytest.raises(GatheringNotFoundException):
        await review_services.create_review(alice, _request(bob, ObjId()))


async def test_reviewee_must_have_participated(make_user, make_gathering):
    alice = await make_user("alice")
    stranger = await make_user("stranger")
    gathering = await make_gathering(alice)

    with pytest.raises(NotParticipatingException) as exc_info:
        await review_services.create_review(alice, _request(stranger, gathering))
    assert exc_info.value.status_code == 403


async def test_reviewer_must_have_participated(make_user, make_gathering):
    alice = await make_user("alice")
    bob = await make_user("bob")
    outsider = await make_user("outsider")
    gathering = await make_gathering(alice, members=[bob])

    with pytest.raises(NotParticipatingException) as exc_info:
        await review_services.create_review(outsider, _request(bob, gathering))
    assert exc_info.value.status_code == 403
    assert exc_info.value.user_id == outsider.doc.id


async def test_duplicate_review_is_rejected(make_user, make_gathering):
    alice = await make_user("alice")
    bob = await make_user("bob")
    gathering = await make_gathering(alice, members=[bob])
    await review_services.create_review(alice, _request(bob, gathering))

    with pytest.raises(DuplicateReviewException) as exc_info:
        await review_services.create_review(alice, _request(bob, gathering))
    assert exc_info.value.status_code == 409

    # The other direction is a different review
    await review_services.create_review(bob, _request(alice, gathering))


async def test_delete_review_checks_author(make_user, make_gathering):
    alice = await make_user("alice")
    bob = await make_user("bob")
    gathering = await make_gathering(alice, members=[bob])
    review = await review_services.create_review(alice, _request(bob, gathering))

    with pytest.raises(ReviewNotOwnedException):
        await review_services.delete_review(bob, ObjId(review.id))

    await review_services.delete_review(alice, ObjId(review.id))
    with pytest.raises(ReviewNotFoundException):
        await review_services.delete_review(alice, ObjId(review.id))


async def test_summarize_reviews_counts_every_flag(db):
    reviewer, reviewee, gathering = ObjId(), ObjId(), ObjId()
    reviews = [
        ReviewModel(reviewer_id=reviewer, reviewee_id=reviewee, gathering_id=gathering,
                    is_practice_helped=True, is_helpful=True),
        ReviewModel(reviewer_id=reviewer, reviewee_id=reviewee, gathering_id=gathering,
                    is_practice_helped=True),
        ReviewModel(reviewer_id=reviewer, reviewee_id=reviewee, gathering_id=gathering,
                    is_keeping_promises=True),
    ]
    stats = review_services.summarize_reviews(reviews)

    assert stats.total_reviews == 3
    assert stats.practice_helped_count == 2
    assert stats.practice_helped_percentage == 66.7
    assert stats.helpful_count == 1
    assert stats.keeping_promises_percentage == 33.3
    assert stats.good_with_music_count == 0
    assert stats.good_with_music_percentage == 0.0


def test_summarize_without_reviews():
    stats = review_services.summarize_reviews([])
    assert stats.total_reviews == 0
    assert stats.helpful_percentage == 0.0


async def test_unique_index_blocks_second_insert(db):
    reviewer, reviewee, gathering = ObjId(), ObjId(), ObjId()
    await ReviewModel(reviewer_id=reviewer, reviewee_id=reviewee,
                      gathering_id=gathering).insert()

    with pytest.raises(DuplicateKeyError):
        await ReviewModel(reviewer_id=reviewer, reviewee_id=reviewee,
                          gathering_id=gathering).insert()


async def test_insert_race_is_reported_as_duplicate(make_user, make_gathering, monkeypatch):
    alice = await make_user("alice")
    bob = await make_user("bob")
    gathering = await make_gathering(alice, members=[bob])
    await review_services.create_review(alice, _request(bob, gathering))

    # Let the read-before-insert check miss the stored review
    async def _find_nothing(*_args, **_kwargs):
        return None
    monkeypatch.setattr(ReviewModel, "find_one", _find_nothing)

    with pytest.raises(DuplicateReviewException) as exc_info:
        await review_services.create_review(alice, _request(bob, gathering))
    assert exc_info.value.status_code == 409
