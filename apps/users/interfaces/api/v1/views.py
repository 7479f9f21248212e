"""
Users API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.views import APIView

from shared.infrastructure.di import get_container
from shared.interfaces.responses import success_response
from ....application.dtos.wishlist_dto import WishlistCommandDTO
from ...serializers import AccountSerializer, WishlistAddSerializer, WishlistItemSerializer


@extend_schema(tags=['Wishlist'])
class WishlistView(APIView):
    """Wishlist of the signed-in user."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: WishlistItemSerializer(many=True)},
        summary="Get my wishlist",
    )
    def get(self, request):
        result = get_container().get_user_wishlist().execute(str(request.user.pk))
        return success_response(WishlistItemSerializer(result.data, many=True).data, "Wishlist retrieved successfully")

    @extend_schema(
        request=WishlistAddSerializer,
        responses={201: None},
        summary="Add a product to my wishlist",
    )
    def post(self, request):
        serializer = WishlistAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        get_container().add_to_wishlist().execute(
            WishlistCommandDTO(user_id=str(request.user.pk), product_id=serializer.validated_data['product_id'])
        )
        return success_response(None, "Product added to wishlist", status.HTTP_201_CREATED)


@extend_schema(tags=['Wishlist'])
class WishlistItemView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="Remove a product from my wishlist")
    def delete(self, request, product_id: UUID):
        get_container().remove_from_wishlist().execute(
            WishlistCommandDTO(user_id=str(request.user.pk), product_id=product_id)
        )
        return success_response(None, "Product removed from wishlist")


@extend_schema(tags=['Admin'])
class UserAccountsView(APIView):
    """Sign-in methods linked to a user. Staff only."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        responses={200: AccountSerializer(many=True)},
        summary="List a user's linked accounts",
    )
    def get(self, request, user_id: int):
        result = get_container().get_user_accounts().execute(str(user_id))
        return success_response(AccountSerializer(result.data, many=True).data, "Accounts retrieved successfully")
