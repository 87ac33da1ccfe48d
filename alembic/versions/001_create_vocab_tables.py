"""Create vocabulary deck tables

Revision ID: 001_create_vocab_tables
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_create_vocab_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """
    Create deck, card, study session and review tables.
    """
    op.create_table(
        'vocab_deck',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('from_language', sa.String(), nullable=False, server_default='en'),
        sa.Column('to_language', sa.String(), nullable=False, server_default='en'),
        sa.Column('level', sa.String(), nullable=False, server_default='mixed'),
        sa.Column('tags', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id', name='vocab_deck_pkey'),
        sa.CheckConstraint(
            "level IN ('A1', 'A2', 'B1', 'B2', 'C1', 'C2', 'mixed')",
            name='vocab_deck_level_check'
        )
    )
    op.create_index(op.f('ix_vocab_deck_owner_id'), 'vocab_deck', ['owner_id'], unique=False)

    op.create_table(
        'vocab_card',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('deck_id', sa.Integer(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('term', sa.String(), nullable=False),
        sa.Column('translation', sa.String(), nullable=False),
        sa.Column('transliteration', sa.String(), nullable=True),
        sa.Column('part_of_speech', sa.String(), nullable=True),
        sa.Column('gender', sa.String(), nullable=True),
        sa.Column('example_sentence', sa.String(), nullable=True),
        sa.Column('example_translation', sa.String(), nullable=True),
        sa.Column('phonetic', sa.String(), nullable=True),
        sa.Column('audio_url', sa.String(), nullable=True),
        sa.Column('tags', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.ForeignKeyConstraint(['deck_id'], ['vocab_deck.id'], name='vocab_card_deck_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='vocab_card_pkey')
    )
    op.create_index(op.f('ix_vocab_card_deck_id'), 'vocab_card', ['deck_id'], unique=False)

    op.create_table(
        'vocab_study_session',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('deck_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=True),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('total_cards_seen', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('correct_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('wrong_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('summary', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['deck_id'], ['vocab_deck.id'], name='vocab_study_session_deck_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='vocab_study_session_pkey')
    )
    op.create_index(op.f('ix_vocab_study_session_deck_id'), 'vocab_study_session', ['deck_id'], unique=False)
    op.create_index(op.f('ix_vocab_study_session_user_id'), 'vocab_study_session', ['user_id'], unique=False)

    op.create_table(
        'vocab_review',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('deck_id', sa.Integer(), nullable=False),
        sa.Column('card_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=True),
        sa.Column('session_id', sa.Integer(), nullable=True),
        sa.Column('rating', sa.String(), nullable=False, server_default='good'),
        sa.Column('reviewed_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('due_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('interval_days', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('ease_factor', sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(['deck_id'], ['vocab_deck.id'], name='vocab_review_deck_id_fkey'),
        sa.ForeignKeyConstraint(['card_id'], ['vocab_card.id'], name='vocab_review_card_id_fkey'),
        sa.ForeignKeyConstraint(
            ['session_id'], ['vocab_study_session.id'], name='vocab_review_session_id_fkey'
        ),
        sa.PrimaryKeyConstraint('id', name='vocab_review_pkey'),
        sa.CheckConstraint(
            "rating IN ('again', 'hard', 'good', 'easy')",
            name='vocab_review_rating_check'
        )
    )
    op.create_index(op.f('ix_vocab_review_deck_id'), 'vocab_review', ['deck_id'], unique=False)
    op.create_index(op.f('ix_vocab_review_card_id'), 'vocab_review', ['card_id'], unique=False)
    op.create_index(op.f('ix_vocab_review_user_id'), 'vocab_review', ['user_id'], unique=False)


def downgrade() -> None:
    """
    Drop deck, card, study session and review tables.
    """
    op.drop_index(op.f('ix_vocab_review_user_id'), table_name='vocab_review')
    op.drop_index(op.f('ix_vocab_review_card_id'), table_name='vocab_review')
    op.drop_index(op.f('ix_vocab_review_deck_id'), table_name='vocab_review')
    op.drop_table('vocab_review')
    op.drop_index(op.f('ix_vocab_study_session_user_id'), table_name='vocab_study_session')
    op.drop_index(op.f('ix_vocab_study_session_deck_id'), table_name='vocab_study_session')
    op.drop_table('vocab_study_session')
    op.drop_index(op.f('ix_vocab_card_deck_id'), table_name='vocab_card')
    op.drop_table('vocab_card')
    op.drop_index(op.f('ix_vocab_deck_owner_id'), table_name='vocab_deck')
    op.drop_table('vocab_deck')
