from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.views import TokenRefreshView
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from apps.users.serializers import ProfileUpdateSerializer, UserProfileSerializer
from .container import build_auth_service, build_user_service
from .serializers import (
    AuthResponseSerializer,
    LoginRequestSerializer,
    RegisterRequestSerializer,
)

logger = get_logger(__name__).bind(component="auth", layer="view")


@extend_schema(tags=["Auth"])
class RegisterView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_auth_service()
    log = logger.bind(view="RegisterView")

    @extend_schema(
        summary="Register user",
        request=RegisterRequestSerializer,
        responses={
            201: AuthResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Processing registration request",
            username=serializer.validated_data.get("username"),
        )
        result = self.service.register(serializer.validated_data)
        return Response(
            {"message": "User registered successfully", **result},
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Auth"])
class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_auth_service()
    log = logger.bind(view="LoginView")

    @extend_schema(
        summary="Login with email and password",
        request=LoginRequestSerializer,
        responses={
            200: AuthResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.service.login(
            serializer.validated_data["email"], serializer.validated_data["password"]
        )
        return Response({"message": "Login successful", **result})


@extend_schema(tags=["Auth"], summary="Refresh JWT")
class RefreshView(TokenRefreshView):
    permission_classes = [AllowAny]


@extend_schema(tags=["Auth"])
class MeView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_user_service()
    log = logger.bind(view="MeView")

    @extend_schema(summary="Get current user", responses={200: UserProfileSerializer})
    def get(self, request):
        self.log.debug("Returning current user profile", user_id=request.user.id)
        dto = self.service.get_profile(request.user.id)
        return Response({"user": UserProfileSerializer(dto).data})


@extend_schema(tags=["Auth"])
class ProfileView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_user_service()
    log = logger.bind(view="ProfileView")

    @extend_schema(
        summary="Update profile",
        request=ProfileUpdateSerializer,
        responses={
            200: UserProfileSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.log.info("Updating profile via API", user_id=request.user.id)
        dto = self.service.update_profile(request.user.id, serializer.validated_data)
        return Response(
            {
                "message": "Profile updated successfully",
                "user": UserProfileSerializer(dto).data,
            }
        )
