from sqlalchemy import BigInteger, Column, DateTime, Integer, Text, func

from ..database import Base

# PostgreSQL gets BIGSERIAL; SQLite only autoincrements an INTEGER primary key
ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")
MAX_POST_ID = 2**63 - 1


class Post(Base):
    """SQLAlchemy model representing a blog post.

    Attributes:
        id (int): Unique post identifier, assigned by the database.
        title (str): Post title.
        content (str): Full post content.
        created_at (datetime): Insertion timestamp, assigned by the database.
    """

    __tablename__ = "posts"
    # Keeps SQLite from handing out a deleted row's id again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(
        ID_TYPE,
        primary_key=True,
        autoincrement=True,
        doc="Unique post identifier",
    )
    title = Column(
        Text,
        nullable=False,
        doc="Post title",
    )
    content = Column(
        Text,
        nullable=False,
        doc="Full post content",
    )
    created_at = Column(
        DateTime,
        server_default=func.current_timestamp(),
        nullable=False,
        doc="Post creation timestamp",
    )

    def __repr__(self) -> str:
        title_value = getattr(self, "title", None)
        if isinstance(title_value, str) and title_value:
            title_repr = title_value[:30] + "..." if len(title_value) > 30 else title_value
        else:
            title_repr = ""
        return f"<Post(id={self.id}, title={title_repr!r})>"
