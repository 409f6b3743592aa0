"""Create leagues, games, slate lines and picks

Revision ID: 001
Revises:
Create Date: 2025-08-20 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create pick'em tables."""
    op.create_table('leagues', sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('invite_code', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column('created_by', sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column('pick_limit', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('push_points', sa.Float(), nullable=False, server_default='0.5'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_leagues_invite_code'), 'leagues', ['invite_code'], unique=False)

    op.create_table('games', sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('season', sa.Integer(), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('home', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('away', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('kickoff', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_games_season'), 'games', ['season'], unique=False)
    op.create_index(op.f('ix_games_week'), 'games', ['week'], unique=False)

    op.create_table('league_slate_lines', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('league_id', sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column('season', sa.Integer(), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('game_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('spread_home', sa.Float(), nullable=True),
        sa.Column('spread_away', sa.Float(), nullable=True),
        sa.Column('source', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('snapped_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('lines_available', sa.Boolean(), nullable=True),
        sa.Column('publish_window', sqlmodel.sql.sqltypes.AutoString(length=16), nullable=True),
        sa.Column('lines_published_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['league_id'], ['leagues.id'], ),
        sa.ForeignKeyConstraint(['game_id'], ['games.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('league_id', 'season', 'week', 'game_id', name='uq_slate_league_week_game'))
    op.create_index(op.f('ix_league_slate_lines_league_id'), 'league_slate_lines', ['league_id'], unique=False)

    op.create_table('picks', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('league_id', sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column('season', sa.Integer(), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('game_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('side', sqlmodel.sql.sqltypes.AutoString(length=4), nullable=False),
        sa.Column('line_value', sa.Float(), nullable=False),
        sa.Column('locked', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('unlock_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('result', sqlmodel.sql.sqltypes.AutoString(length=4), nullable=True),
        sa.Column('points', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['league_id'], ['leagues.id'], ),
        sa.ForeignKeyConstraint(['game_id'], ['games.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('league_id', 'user_id', 'season', 'week', 'game_id',
                            name='uq_pick_league_user_week_game'))
    op.create_index(op.f('ix_picks_league_id'), 'picks', ['league_id'], unique=False)
    op.create_index(op.f('ix_picks_user_id'), 'picks', ['user_id'], unique=False)


def downgrade() -> None:
    """Drop pick'em tables."""
    op.drop_index(op.f('ix_picks_user_id'), table_name='picks')
    op.drop_index(op.f('ix_picks_league_id'), table_name='picks')
    op.drop_table('picks')
    op.drop_index(op.f('ix_league_slate_lines_league_id'), table_name='league_slate_lines')
    op.drop_table('league_slate_lines')
    op.drop_index(op.f('ix_games_week'), table_name='games')
    op.drop_index(op.f('ix_games_season'), table_name='games')
    op.drop_table('games')
    op.drop_index(op.f('ix_leagues_invite_code'), table_name='leagues')
    op.drop_table('leagues')
