"""Third-party 리소스 조회."""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from upstreamguard.api.deps import get_third_party_client
from upstreamguard.services.third_party import ThirdPartyClient

router = APIRouter()


@router.get("/{resource_id}")
async def get_resource(
    resource_id: str,
    client: ThirdPartyClient = Depends(get_third_party_client),
):
    resource = await client.fetch_resource(resource_id)
    return asdict(resource)
