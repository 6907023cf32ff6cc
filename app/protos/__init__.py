"""
Protocol buffers for the health-check and media RPC surfaces.

The .proto files in this package are the only schema. grpcio-tools compiles
them on first import into the usual *_pb2 / *_pb2_grpc modules
(app.protos.media_pb2, app.protos.media_pb2_grpc, ...), which requires the
directory holding the `app` package to be on sys.path.
"""
import grpc

health_check_pb2, health_check_pb2_grpc = grpc.protos_and_services(
    "app/protos/health_check.proto"
)
media_pb2, media_pb2_grpc = grpc.protos_and_services("app/protos/media.proto")

__all__ = [
    "health_check_pb2",
    "health_check_pb2_grpc",
    "media_pb2",
    "media_pb2_grpc",
]
