"""
gRPC Client - Python Backend → Thematics Service Communication

Architecture:
    Client → HTTP → Python Backend → gRPC (unary, JSON payload) → Thematics Service
"""

import json
import logging

import grpc

logger = logging.getLogger(__name__)

DEFAULT_ADDRESS = "localhost:50051"
DEFAULT_TIMEOUT = 1.0

LIST_THEMATICS_METHOD = "/tir.TirService/ListThematics"


def _encode(message):
    return json.dumps(message).encode('utf-8')


def _decode(payload):
    return json.loads(payload.decode('utf-8')) if payload else {}


class ThematicsClient:
    """gRPC client for the thematics service"""

    def __init__(self, address=DEFAULT_ADDRESS, timeout=DEFAULT_TIMEOUT):
        self.address = address
        self.timeout = timeout

    def _call(self, method, request):
        """
        Invoke a unary method on a fresh channel

        Returns:
            dict: decoded response message
        """
        with grpc.insecure_channel(self.address) as channel:
            stub = channel.unary_unary(
                method,
                request_serializer=_encode,
                response_deserializer=_decode,
            )
            logger.debug(f"[Thematics] Calling {method} on {self.address}")
            return stub(request, timeout=self.timeout)

    def list_thematics(self, account_id):
        """
        List thematics visible to an account

        Returns:
            dict: {'success': bool, 'thematics': list, 'error': str (if failed)}
        """
        try:
            response = self._call(LIST_THEMATICS_METHOD, {'accountId': account_id})
        except grpc.RpcError as e:
            logger.error(f"[Thematics] RPC to {self.address} failed: {e}")
            return {'success': False, 'error': 'Thematics service unavailable'}
        except ValueError as e:
            logger.error(f"[Thematics] Invalid response payload: {e}")
            return {'success': False, 'error': 'Invalid response from thematics service'}

        thematics = response.get('thematics', []) if isinstance(response, dict) else None
        if not isinstance(thematics, list):
            logger.error("[Thematics] Response has no thematics list")
            return {'success': False, 'error': 'Invalid response from thematics service'}

        return {'success': True, 'thematics': thematics}
