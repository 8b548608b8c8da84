from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from users.serializers import CurrentUserSerializer


# ---------------------------
# VIEW
# ---------------------------


@method_decorator(ensure_csrf_cookie, name="dispatch")
class CurrentUserView(APIView):
    """
    GET /api/auth/user/

    Also primes the csrftoken cookie the SPA echoes on unsafe requests.
    """

    permission_classes = [IsAuthenticated]
    serializer_class = CurrentUserSerializer

    @extend_schema(
        tags=["Auth"],
        responses={200: CurrentUserSerializer},
        description="Get the signed-in user (401 when anonymous)",
    )
    def get(self, request):
        return Response(CurrentUserSerializer(request.user).data)
