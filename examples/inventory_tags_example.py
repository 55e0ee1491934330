"""Example managing inventory tags with the Zentral SDK.

Set ZTL_API_BASE_URL and ZTL_API_TOKEN, or put them in a .env file.
"""

import asyncio
import logging

from zentral.sdk import HTTPError, ListOptions, ZentralClient, ZentralError, load_dotenv_for_sdk
from zentral.sdk.models import TagRequest, TaxonomyRequest


async def main() -> None:
    """List the tags, then create a tag in a new taxonomy and delete both."""

    load_dotenv_for_sdk()
    logging.basicConfig(level=logging.INFO)

    print("=== Zentral SDK Tags Example ===\n")

    async with ZentralClient.from_environment(user_agent="zentral-tags-example/1.0") as client:
        # 1. List the first tags
        print("1. Listing tags...")
        tags = await client.tags.list(ListOptions(limit=10))
        for tag in tags:
            print(f"   - {tag.name} (#{tag.color or 'no color'})")

        # 2. Create a taxonomy and a tag, unless they exist
        print("\n2. Creating a tag...")
        taxonomy = await client.taxonomies.get_by_name("SDK example")
        if taxonomy is None:
            taxonomy = await client.taxonomies.create(TaxonomyRequest(name="SDK example"))
        tag = await client.tags.get_by_name("sdk-example")
        if tag is None:
            tag = await client.tags.create(
                TagRequest(name="sdk-example", taxonomy=taxonomy.id, color="ff0000")
            )
        print(f"   ✓ Tag {tag.id} in taxonomy {taxonomy.id}")

        # 3. Clean up
        print("\n3. Cleaning up...")
        try:
            await client.tags.delete(tag.id)
            await client.taxonomies.delete(taxonomy.id)
            print("   ✓ Deleted")
        except HTTPError as e:
            print(f"   ✗ Could not delete: {e.status_code} {e.message}")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except ZentralError as e:
        print(f"✗ {e}")
