from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from retailhub.application.catalog.master_product_service import MasterProductService
from retailhub.application.catalog.product_service import ProductService
from retailhub.application.common.service import Service
from retailhub.application.finance.account_service import AccountService
from retailhub.application.finance.account_type_service import AccountTypeService
from retailhub.application.finance.transaction_service import TransactionService
from retailhub.application.sales.order_service import OrderService
from retailhub.config import get_settings
from retailhub.infrastructure.catalog.repositories import ProductRepository
from retailhub.infrastructure.common.controller import Controller
from retailhub.infrastructure.common.repository import Repository
from retailhub.infrastructure.finance.repositories import TransactionRepository
from retailhub.infrastructure.sales.repositories import OrderRepository
from retailhub.mapping.responses import (
    AccountCategoryResponseMapper,
    AccountResponseMapper,
    AccountTypeResponseMapper,
    FinanceReportResponseMapper,
    MasterProductResponseMapper,
    OrderResponseMapper,
    ProductCategoryResponseMapper,
    ProductDailyStockResponseMapper,
    ProductResponseMapper,
    ProductStockInResponseMapper,
    RoleResponseMapper,
    TransactionResponseMapper,
)
from retailhub.models import (
    Account,
    AccountCategory,
    AccountType,
    MasterProduct,
    ProductCategory,
    Role,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    # Repositories
    product_category_repository = providers.Factory(
        Repository, db=db, resource="product_category", orm_model=ProductCategory
    )
    master_product_repository = providers.Factory(
        Repository, db=db, resource="master_product", orm_model=MasterProduct
    )
    product_repository = providers.Factory(ProductRepository, db=db)
    role_repository = providers.Factory(Repository, db=db, resource="role", orm_model=Role)
    account_category_repository = providers.Factory(
        Repository, db=db, resource="account_category", orm_model=AccountCategory
    )
    account_type_repository = providers.Factory(
        Repository, db=db, resource="account_type", orm_model=AccountType
    )
    account_repository = providers.Factory(
        Repository, db=db, resource="account", orm_model=Account
    )
    transaction_repository = providers.Factory(TransactionRepository, db=db)
    order_repository = providers.Factory(OrderRepository, db=db)

    # Catalog services
    product_category_service = providers.Factory(Service, repository=product_category_repository)
    master_product_service = providers.Factory(
        MasterProductService,
        repository=master_product_repository,
        category_repository=product_category_repository,
    )
    product_service = providers.Factory(
        ProductService,
        repository=product_repository,
        master_product_repository=master_product_repository,
    )

    # Identity services
    role_service = providers.Factory(Service, repository=role_repository)

    # Finance services
    account_category_service = providers.Factory(Service, repository=account_category_repository)
    account_type_service = providers.Factory(AccountTypeService, repository=account_type_repository)
    account_service = providers.Factory(
        AccountService,
        repository=account_repository,
        account_category_repository=account_category_repository,
        account_type_repository=account_type_repository,
    )
    transaction_service = providers.Factory(
        TransactionService,
        repository=transaction_repository,
        account_repository=account_repository,
    )

    # Sales services
    order_service = providers.Factory(
        OrderService,
        repository=order_repository,
        product_repository=product_repository,
        invoice_prefix=settings.provided.INVOICE_PREFIX,
    )

    # Response mappers (stateless)
    product_stock_in_response_mapper = providers.Singleton(ProductStockInResponseMapper)
    product_daily_stock_response_mapper = providers.Singleton(ProductDailyStockResponseMapper)
    finance_report_response_mapper = providers.Singleton(FinanceReportResponseMapper)
    order_response_mapper = providers.Singleton(OrderResponseMapper)

    # Controllers
    product_category_controller = providers.Factory(
        Controller,
        service=product_category_service,
        response_mapper=providers.Singleton(ProductCategoryResponseMapper),
    )
    master_product_controller = providers.Factory(
        Controller,
        service=master_product_service,
        response_mapper=providers.Singleton(MasterProductResponseMapper),
    )
    product_controller = providers.Factory(
        Controller,
        service=product_service,
        response_mapper=providers.Singleton(ProductResponseMapper),
    )
    role_controller = providers.Factory(
        Controller,
        service=role_service,
        response_mapper=providers.Singleton(RoleResponseMapper),
    )
    account_category_controller = providers.Factory(
        Controller,
        service=account_category_service,
        response_mapper=providers.Singleton(AccountCategoryResponseMapper),
    )
    account_type_controller = providers.Factory(
        Controller,
        service=account_type_service,
        response_mapper=providers.Singleton(AccountTypeResponseMapper),
    )
    account_controller = providers.Factory(
        Controller,
        service=account_service,
        response_mapper=providers.Singleton(AccountResponseMapper),
    )
    transaction_controller = providers.Factory(
        Controller,
        service=transaction_service,
        response_mapper=providers.Singleton(TransactionResponseMapper),
    )
    order_controller = providers.Factory(
        Controller,
        service=order_service,
        response_mapper=order_response_mapper,
    )


# Initialize container
container = Container()
