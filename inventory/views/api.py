from asgiref.sync import async_to_sync
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from ..serializers import SupplierArchiveSerializer, SupplierIdsSerializer, SupplierSerializer
from ..services.view_options import TRUE_VALUES, ViewOptions
from ..store import get_store


class SupplierListAPIView(APIView):
    """List or create suppliers.

    Query params:
        include_archived: ``1``/``true`` to include archived suppliers.
        search: keep suppliers whose name, website, phone or email contain it.
    """

    permission_classes = [permissions.AllowAny]

    def get(self, request):
        include = (request.query_params.get("include_archived") or "").lower() in TRUE_VALUES
        suppliers = async_to_sync(get_store().suppliers.list_suppliers)(include_archived=include)
        suppliers = ViewOptions(search=request.query_params.get("search") or "").filter_rows(suppliers)
        return Response(SupplierSerializer(suppliers, many=True).data)

    def post(self, request):
        serializer = SupplierSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        supplier = async_to_sync(get_store().suppliers.create_supplier)(serializer.validated_data)
        return Response(SupplierSerializer(supplier).data, status=status.HTTP_201_CREATED)


class SupplierDetailAPIView(APIView):
    """Retrieve, partially update or delete a single supplier."""

    permission_classes = [permissions.AllowAny]

    def get(self, request, pk):
        supplier = async_to_sync(get_store().suppliers.get_supplier)(pk)
        return Response(SupplierSerializer(supplier).data)

    def patch(self, request, pk):
        serializer = SupplierSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        supplier = async_to_sync(get_store().suppliers.update_supplier)(pk, serializer.validated_data)
        return Response(SupplierSerializer(supplier).data)

    def delete(self, request, pk):
        deleted = async_to_sync(get_store().suppliers.delete_suppliers)([pk])
        if not deleted:
            return Response({"detail": "Not found.", "status_code": 404}, status=404)
        return Response(status=status.HTTP_204_NO_CONTENT)


class SupplierArchiveAPIView(APIView):
    """Archive (or restore with ``"archived": false``) several suppliers."""

    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = SupplierArchiveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        count = async_to_sync(get_store().suppliers.set_archived)(
            serializer.validated_data["ids"], serializer.validated_data["archived"]
        )
        return Response({"count": count, "archived": serializer.validated_data["archived"]})


class SupplierBulkDeleteAPIView(APIView):
    """Delete several suppliers; ids that do not exist are skipped."""

    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = SupplierIdsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        count = async_to_sync(get_store().suppliers.delete_suppliers)(serializer.validated_data["ids"])
        return Response({"count": count})
