"""
Endpoints do odontograma de um prontuário

    - GET  /api/patients/{paciente_id}/records/{prontuario_id}/odontogram/
    - POST /api/patients/{paciente_id}/records/{prontuario_id}/odontogram/
"""
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from api.odontogram.serializers import OdontogramSerializer
from api.odontogram.services import OdontogramService


class OdontogramaAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, paciente_id, prontuario_id):
        view = OdontogramService.get(paciente_id, prontuario_id)
        return Response(OdontogramSerializer(view).data)

    def post(self, request, paciente_id, prontuario_id):
        view = OdontogramService.append_procedure(
            paciente_id,
            prontuario_id,
            request.data,
            actor=request.user.id,
        )
        return Response(OdontogramSerializer(view).data)
