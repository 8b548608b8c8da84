# users/urls.py

from django.urls import path

from .views import CurrentUserView, GoogleCallbackView, GoogleLoginView, LogoutView

app_name = "users"

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("google/", GoogleLoginView.as_view(), name="google-login"),
    path("google/callback/", GoogleCallbackView.as_view(), name="google-callback"),
    path("logout/", LogoutView.as_view(), name="logout"),
    # ---------------- AUTHENTICATED ----------------
    path("user/", CurrentUserView.as_view(), name="current-user"),
]
