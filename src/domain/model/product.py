import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

DEFAULT_STATUS = 'active'
ACTIVE_STATUS = 'active'


@dataclass
class Product:
    """Domain model representing a catalog product."""

    IMMUTABLE_FIELDS = ('id', 'created_at', 'updated_at')

    id: str
    name: str
    price: str
    sku: str
    created_at: datetime
    updated_at: datetime
    stock: int = 0
    status: str = DEFAULT_STATUS
    description: str | None = None
    image: str | None = None

    @staticmethod
    def create(
        name: str,
        price: str,
        sku: str,
        stock: int | None = None,
        status: str | None = None,
        description: str | None = None,
        image: str | None = None,
    ) -> 'Product':
        """Factory method: assigns id, timestamps and field defaults.

        ``updated_at`` starts equal to ``created_at``.
        """
        now = datetime.now(timezone.utc)
        return Product(
            id=str(uuid.uuid4()),
            name=name,
            price=price,
            sku=sku,
            created_at=now,
            updated_at=now,
            stock=stock or 0,
            status=status or DEFAULT_STATUS,
            description=description or None,
            image=image or None,
        )

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS
