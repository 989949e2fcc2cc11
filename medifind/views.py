from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def api_root_view(request):
    return Response({
        "service": "MediFind API",
        "status": "running",
        "endpoints": {
            "users": "/api/users",
            "pharmacies": "/api/pharmacies",
            "medicines": "/api/medicines",
            "search": "/api/medicines/search",
        },
    })
