from __future__ import annotations

import random

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.items.dtos import CreateItemDTO, ItemKindEnum
from modules.items.models import Item
from modules.items.repositories.django_repository import ItemDjangoRepository
from modules.items.services import ItemService
from modules.members.dtos import JoinMemberDTO
from modules.members.exceptions import DuplicateMember
from modules.members.models import Member
from modules.members.repositories.django_repository import MemberDjangoRepository
from modules.members.services import MemberService
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService


class Command(BaseCommand):
    help = "Seed database with development members, items and orders."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=10,
            help="Number of orders to place (default: 10).",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        member_repo = MemberDjangoRepository()
        item_repo = ItemDjangoRepository()

        users_created = self._seed_users()
        members = self._seed_members(MemberService(member_repo))
        items = self._seed_items(ItemService(item_repo))
        orders_placed = self._seed_orders(
            OrderService(OrderDjangoRepository(), member_repo, item_repo),
            members,
            items,
            options["orders"],
        )

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"members={len(members)}, "
                f"items={len(items)}, "
                f"orders={orders_placed}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        if User.objects.filter(username="admin").exists():
            return 0
        User.objects.create_superuser("admin", password="admin123")
        return 1

    def _seed_members(self, service: MemberService) -> list[Member]:
        self.stdout.write("Creating members...")
        seed_members = [
            ("kim", "Seoul", "Gangnam-daero 1", "06000"),
            ("lee", "Busan", "Haeundae-ro 22", "48000"),
            ("park", "Incheon", "Songdo-dong 7", "21900"),
            ("choi", "Daegu", "Dongseong-ro 3", "41900"),
        ]
        members: list[Member] = []
        for name, city, street, zipcode in seed_members:
            try:
                member_id = service.join(
                    JoinMemberDTO(name=name, city=city, street=street, zipcode=zipcode)
                )
            except DuplicateMember:
                members.extend(service.find_members({"name": name}))
                continue
            members.append(service.find_one(member_id))
        return members

    def _seed_items(self, service: ItemService) -> list[Item]:
        self.stdout.write("Creating items...")
        seed_items = [
            CreateItemDTO(
                name="JPA Book",
                price=10000,
                stock_quantity=100,
                kind=ItemKindEnum.BOOK,
                author="Young-han Kim",
                isbn="9788960777330",
            ),
            CreateItemDTO(
                name="Spring Book",
                price=20000,
                stock_quantity=100,
                kind=ItemKindEnum.BOOK,
                author="Rod Johnson",
                isbn="9780764543852",
            ),
            CreateItemDTO(
                name="Kind of Blue",
                price=15000,
                stock_quantity=50,
                kind=ItemKindEnum.ALBUM,
                artist="Miles Davis",
            ),
            CreateItemDTO(
                name="Seven Samurai",
                price=25000,
                stock_quantity=30,
                kind=ItemKindEnum.MOVIE,
                director="Akira Kurosawa",
                actor="Toshiro Mifune",
            ),
        ]
        items: list[Item] = []
        for dto in seed_items:
            existing = service.find_items({"name": dto.name})
            if existing:
                items.extend(existing)
                continue
            items.append(service.save_item(dto))
        return items

    def _seed_orders(
        self,
        service: OrderService,
        members: list[Member],
        items: list[Item],
        count: int,
    ) -> int:
        self.stdout.write("Placing orders...")
        if not members or not items:
            return 0
        for _ in range(count):
            service.place_order(
                random.choice(members).id,
                random.choice(items).id,
                random.randint(1, 3),
            )
        return count
