"""
Orders API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from shared.infrastructure.di import get_container
from shared.interfaces.identity import get_request_identity
from shared.interfaces.responses import success_response
from ....application.dtos.cart_dto import (
    AddCartItemDTO,
    GetCartDTO,
    RemoveCartItemDTO,
    UpdateCartItemDTO,
)
from ....application.dtos.order_dto import GetOrderDTO
from ...serializers import (
    CartItemCreateSerializer,
    CartItemSerializer,
    CartItemUpdateSerializer,
    CartWithItemsSerializer,
    OrderSerializer,
)

SESSION_HEADER = OpenApiParameter(
    name='X-Session-Id',
    type=str,
    location=OpenApiParameter.HEADER,
    required=False,
    description="Guest session id. Required when not signed in.",
)


def current_cart(request):
    """Resolve (creating if needed) the cart of whoever sent the request."""
    identity = get_request_identity(request)
    result = get_container().get_or_create_cart().execute(
        GetCartDTO(user_id=identity.user_id, session_id=identity.session_id)
    )
    return result.data


@extend_schema(tags=['Cart'], parameters=[SESSION_HEADER])
class CartView(APIView):
    """Cart endpoint for signed-in users and guests."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CartWithItemsSerializer},
        summary="Get current cart with items",
    )
    def get(self, request):
        cart = current_cart(request)
        result = get_container().get_cart_details().execute(cart.id)
        return success_response(CartWithItemsSerializer(result.data).data, "Cart retrieved successfully")

    @extend_schema(
        request=CartItemCreateSerializer,
        responses={201: CartItemSerializer},
        summary="Add item to cart",
    )
    def post(self, request):
        serializer = CartItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = current_cart(request)
        result = get_container().add_item_to_cart().execute(
            AddCartItemDTO(cart_id=cart.id, **serializer.validated_data)
        )
        return success_response(
            CartItemSerializer(result.data).data,
            "Item added to cart",
            status.HTTP_201_CREATED,
        )

    @extend_schema(summary="Clear cart")
    def delete(self, request):
        cart = current_cart(request)
        get_container().clear_cart().execute(cart.id)
        return success_response(None, "Cart cleared")


@extend_schema(tags=['Cart'], parameters=[SESSION_HEADER])
class CartItemView(APIView):
    """Cart item endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CartItemUpdateSerializer,
        responses={200: CartItemSerializer},
        summary="Update cart item quantity",
    )
    def patch(self, request, item_id: UUID):
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = current_cart(request)
        result = get_container().update_cart_item().execute(
            UpdateCartItemDTO(item_id=item_id, quantity=serializer.validated_data['quantity'], cart_id=cart.id)
        )
        if result.data is None:
            return success_response(None, "Item removed from cart")
        return success_response(CartItemSerializer(result.data).data, "Item updated")

    @extend_schema(summary="Remove item from cart")
    def delete(self, request, item_id: UUID):
        cart = current_cart(request)
        get_container().remove_cart_item().execute(RemoveCartItemDTO(item_id=item_id, cart_id=cart.id))
        return success_response(None, "Item removed from cart")


@extend_schema(tags=['Orders'])
class OrderListCreateView(APIView):
    """Order list and create endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: OrderSerializer(many=True)},
        summary="List user's orders",
    )
    def get(self, request):
        result = get_container().get_orders().execute(str(request.user.pk))
        return success_response(OrderSerializer(result.data, many=True).data, "Orders retrieved successfully")

    @extend_schema(
        request=None,
        responses={201: OrderSerializer},
        summary="Create order from cart",
    )
    def post(self, request):
        result = get_container().place_order().execute(str(request.user.pk))
        return success_response(
            OrderSerializer(result.data).data,
            "Order placed successfully",
            status.HTTP_201_CREATED,
        )


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id: UUID):
        result = get_container().get_order().execute(
            GetOrderDTO(user_id=str(request.user.pk), order_id=order_id)
        )
        return success_response(OrderSerializer(result.data).data, "Order retrieved successfully")
