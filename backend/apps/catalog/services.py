from __future__ import annotations

from typing import Any, Dict, List, Union

from apps.common import get_logger
from apps.common.errors import NotAuthorizedError, NotFoundError
from .cache import ProductListingCache
from .commands import ProductCreateCommand, ProductSearchCommand, ProductUpdateCommand
from .dtos import LikeStateDTO, ProductDTO, ProductPageDTO
from .mappers import ProductMapper
from .protocols import ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        listing_cache: ProductListingCache,
        disable_cache: bool = False,
    ):
        self.products = products
        self.listing_cache = listing_cache
        self.disable_cache = disable_cache
        self.logger = logger.bind(service="ProductService")

    def _require(self, product_id: int, *, detail: bool = False):
        product = (
            self.products.get_detail(product_id)
            if detail
            else self.products.get(id=product_id)
        )
        if not product:
            self.logger.info("Product not found", product_id=product_id)
            raise NotFoundError("Product not found", details={"id": str(product_id)})
        return product

    def _require_owner(self, product, actor_id: int, action: str) -> None:
        if product.seller_id != actor_id:
            self.logger.warning(
                "Product change rejected: not the seller",
                product_id=product.id,
                actor_id=actor_id,
                action=action,
            )
            raise NotAuthorizedError(f"Not authorized to {action} this product")

    def search(
        self, filters: Union[Dict[str, Any], ProductSearchCommand]
    ) -> ProductPageDTO:
        cmd = (
            filters
            if isinstance(filters, ProductSearchCommand)
            else ProductSearchCommand.from_raw(filters)
        )
        token = cmd.cache_token()
        self.logger.debug(
            "Searching products", query=token, cache_enabled=not self.disable_cache
        )
        if not self.disable_cache:
            cached = self.listing_cache.get(token)
            if cached is not None:
                self.logger.debug("Product search cache hit", query=token)
                return cached
            self.logger.debug("Product search cache miss", query=token)
        products, total = self.products.search(cmd)
        page = ProductPageDTO(
            products=ProductMapper.many_to_dto(products),
            pagination=cmd.window.summarize(len(products), total),
        )
        if not self.disable_cache:
            self.listing_cache.set(token, page)
        return page

    def get_product(self, product_id: int, count_view: bool = True) -> ProductDTO:
        self.logger.debug("Fetching product", product_id=product_id, count_view=count_view)
        product = self._require(product_id, detail=True)
        if count_view:
            self.products.increment_views(product_id)
            # Reflect the increment without re-reading the row
            product.views += 1
        return ProductMapper.to_dto(product)

    def increment_views(self, product_id: int) -> None:
        if not self.products.increment_views(product_id):
            raise NotFoundError("Product not found", details={"id": str(product_id)})

    def create_product(
        self, seller_id: int, data: Union[Dict[str, Any], ProductCreateCommand]
    ) -> ProductDTO:
        cmd = (
            data
            if isinstance(data, ProductCreateCommand)
            else ProductCreateCommand.from_raw(data)
        )
        self.logger.info("Creating product", seller_id=seller_id, title=cmd.title)
        product = self.products.create(
            title=cmd.title,
            description=cmd.description,
            category=cmd.category,
            price=cmd.price,
            condition=cmd.condition,
            images=cmd.images,
            location=cmd.location,
            tags=cmd.tags,
            seller_id=seller_id,
        )
        self.listing_cache.bump()
        self.logger.info("Product created", product_id=product.id)
        return ProductMapper.to_dto(self._require(product.id, detail=True))

    def update_product(
        self,
        product_id: int,
        actor_id: int,
        data: Union[Dict[str, Any], ProductUpdateCommand],
    ) -> ProductDTO:
        cmd = (
            data
            if isinstance(data, ProductUpdateCommand)
            else ProductUpdateCommand.from_raw(product_id, data)
        )
        self.logger.info("Updating product", product_id=product_id, actor_id=actor_id)
        product = self._require(product_id)
        self._require_owner(product, actor_id, "update")
        self.products.update_scalar(product, **cmd.changes())
        self.listing_cache.bump()
        self.logger.info("Product updated", product_id=product_id)
        return ProductMapper.to_dto(self._require(product_id, detail=True))

    def delete_product(self, product_id: int, actor_id: int) -> None:
        self.logger.info("Deleting product", product_id=product_id, actor_id=actor_id)
        product = self._require(product_id)
        self._require_owner(product, actor_id, "delete")
        self.products.delete(product)
        self.listing_cache.bump()
        self.logger.info("Product deleted", product_id=product_id)

    def list_for_seller(self, seller_id: int) -> List[ProductDTO]:
        self.logger.debug("Listing seller products", seller_id=seller_id)
        return ProductMapper.many_to_dto(self.products.list_for_seller(seller_id))

    def set_availability(self, product_id: int, available: bool) -> ProductDTO:
        product = self._require(product_id)
        if product.is_available != available:
            self.products.update_scalar(product, is_available=available)
            self.listing_cache.bump()
            self.logger.info(
                "Product availability changed", product_id=product_id, available=available
            )
        return ProductMapper.to_dto(product)

    def toggle_like(self, product_id: int, user_id: int) -> LikeStateDTO:
        product = self._require(product_id)
        liked, count = self.products.toggle_like(product, user_id)
        self.logger.debug(
            "Toggled product like", product_id=product_id, user_id=user_id, liked=liked
        )
        return LikeStateDTO(is_liked=liked, likes_count=count)
