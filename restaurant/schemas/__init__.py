from restaurant.schemas.common import APIModel, DataResponse, ListResponse, MessageResponse, ErrorResponse
from restaurant.schemas.user import (
    User, UserCreate, AdminCreate, UserUpdate, UserSummary, LoginRequest, LoginResponse,
    AdminInfo, VerifyUserRequest, ResetPasswordRequest, MemberGrant, MembershipPurchase,
)
from restaurant.schemas.menu import MenuItem, MenuItemCreate, MenuItemPriceUpdate
from restaurant.schemas.table import (
    Table, TableCreate, TableType, TableTypeCreate, AvailabilityRequest, AvailableTable,
)
from restaurant.schemas.reservation import Reservation, ReservationCancel, ReservationCreate, ReservationStatusUpdate
from restaurant.schemas.order import (
    Order, OrderCreate, OrderByIDCreate, OrderCreatedResponse,
    OrderDetail, OrderDetailCreate, PricedOrderDetail,
    CheckoutItem, CheckoutRequest, CheckoutResult,
)
from restaurant.schemas.payment import (
    Payment, PaymentCreate, PayPaymentCreate, PaymentCreatedResponse, CustomerPayment,
)
from restaurant.schemas.staff import Staff, StaffCreate
from restaurant.schemas.feedback import Feedback, FeedbackCreate
from restaurant.schemas.report import RevenueByDay, PopularItem, BusiestTime
