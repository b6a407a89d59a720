from alembic import op
import sqlalchemy as sa

revision = "0001_create_people_and_cities"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "cities",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("country_code", sa.String(length=3), nullable=False),
    )

    # city_id is a plain integer: inhabitants are guarded by the application, not a foreign key
    op.create_table(
        "people",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("children", sa.Integer(), nullable=True),
        sa.Column("city_id", sa.Integer(), nullable=True),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("income", sa.Numeric(precision=14, scale=2), nullable=True),
        sa.Column("birthdate", sa.Date(), nullable=True),
        sa.Column("remarks", sa.Text(), nullable=True),
    )

def downgrade():
    op.drop_table("people")
    op.drop_table("cities")
