from fastapi import APIRouter

# Auth
from restaurant.api.public.auth import router as auth_router

# Public: users & membership
from restaurant.api.public.users import router as users_router

# Public: menu, chefs, tables, availability
from restaurant.api.public.menu import router as menu_router
from restaurant.api.public.tables import router as tables_router

# Public: reservations, orders, payments
from restaurant.api.public.reservations import router as reservations_router
from restaurant.api.public.orders import router as orders_router
from restaurant.api.public.payments import router as payments_router

# Public: feedback
from restaurant.api.public.feedback import router as feedback_router

# Admin
from restaurant.api.admin.users import router as admin_users_router
from restaurant.api.admin.menu import router as admin_menu_router
from restaurant.api.admin.tables import router as admin_tables_router, table_type_router
from restaurant.api.admin.staff import router as admin_staff_router
from restaurant.api.admin.reservations import router as admin_reservations_router
from restaurant.api.admin.orders import router as admin_orders_router
from restaurant.api.admin.payments import router as admin_payments_router
from restaurant.api.admin.feedback import router as admin_feedback_router
from restaurant.api.admin.reports import router as reports_router

api_router = APIRouter()

# --- Auth ---
api_router.include_router(auth_router)

# --- Public: profile & membership ---
api_router.include_router(users_router)

# --- Public: menu & tables ---
api_router.include_router(menu_router)
api_router.include_router(tables_router)

# --- Public: reservations, orders, payments ---
api_router.include_router(reservations_router)
api_router.include_router(orders_router)
api_router.include_router(payments_router)

# --- Public: feedback ---
api_router.include_router(feedback_router)

# --- Admin ---
api_router.include_router(admin_users_router)
api_router.include_router(admin_menu_router)
api_router.include_router(admin_tables_router)
api_router.include_router(table_type_router)
api_router.include_router(admin_staff_router)
api_router.include_router(admin_reservations_router)
api_router.include_router(admin_orders_router)
api_router.include_router(admin_payments_router)
api_router.include_router(admin_feedback_router)
api_router.include_router(reports_router)
