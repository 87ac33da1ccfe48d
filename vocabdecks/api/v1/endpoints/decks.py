"""
Deck actions.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import Optional
from vocabdecks.core.database import get_session
from vocabdecks.core.security import get_request_context
from vocabdecks.schemas.auth import RequestContext
from vocabdecks.schemas.base import ActionResponse
from vocabdecks.schemas.deck import (
    CreateDeckRequest,
    DeckData,
    DeckListData,
    DeckResponse,
    ListDecksRequest,
    UpdateDeckRequest
)
from vocabdecks.services import deck_service

router = APIRouter(prefix="/actions", tags=["decks"])


@router.post("/createDeck", response_model=ActionResponse[DeckData])
async def create_deck(
    request: CreateDeckRequest,
    context: RequestContext = Depends(get_request_context),
    session: Session = Depends(get_session)
):
    """Create a deck owned by the signed-in user."""
    deck = deck_service.create_deck(session, context, request)
    return ActionResponse[DeckData](data=DeckData(deck=DeckResponse.model_validate(deck)))


@router.post("/updateDeck", response_model=ActionResponse[DeckData])
async def update_deck(
    request: UpdateDeckRequest,
    context: RequestContext = Depends(get_request_context),
    session: Session = Depends(get_session)
):
    """Update the supplied fields of one of the signed-in user's decks."""
    deck = deck_service.update_deck(session, context, request)
    return ActionResponse[DeckData](data=DeckData(deck=DeckResponse.model_validate(deck)))


@router.post("/listDecks", response_model=ActionResponse[DeckListData])
async def list_decks(
    request: Optional[ListDecksRequest] = None,
    context: RequestContext = Depends(get_request_context),
    session: Session = Depends(get_session)
):
    """List the signed-in user's decks. The request body is optional."""
    decks = deck_service.list_decks(session, context, request or ListDecksRequest())
    items = [DeckResponse.model_validate(deck) for deck in decks]
    return ActionResponse[DeckListData](data=DeckListData(items=items, total=len(items)))
