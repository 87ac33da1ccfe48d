"""
Card actions.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from vocabdecks.core.database import get_session
from vocabdecks.core.security import get_request_context
from vocabdecks.schemas.auth import RequestContext
from vocabdecks.schemas.base import ActionResponse
from vocabdecks.schemas.card import (
    CardData,
    CardListData,
    CardResponse,
    ListCardsRequest,
    UpsertCardRequest
)
from vocabdecks.services import card_service

router = APIRouter(prefix="/actions", tags=["cards"])


@router.post("/upsertCard", response_model=ActionResponse[CardData])
async def upsert_card(
    request: UpsertCardRequest,
    context: RequestContext = Depends(get_request_context),
    session: Session = Depends(get_session)
):
    """
    Create a card, or replace the card with the given id.

    When updating, omitted optional text fields are cleared; ``displayOrder``
    and ``isActive`` keep their stored values.
    """
    card = card_service.upsert_card(session, context, request)
    return ActionResponse[CardData](data=CardData(card=CardResponse.model_validate(card)))


@router.post("/listCards", response_model=ActionResponse[CardListData])
async def list_cards(
    request: ListCardsRequest,
    context: RequestContext = Depends(get_request_context),
    session: Session = Depends(get_session)
):
    """List a deck's cards in display order."""
    cards = card_service.list_cards(session, context, request)
    items = [CardResponse.model_validate(card) for card in cards]
    return ActionResponse[CardListData](data=CardListData(items=items, total=len(items)))
