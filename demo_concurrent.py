import asyncio
import httpx
from sdk.pystore import StoreClient

async def create(client, n):
    try:
        p = await client.create_product_async(name=f"Bulk item {n}", category="Bulk", price=100 * n, stock=n)
        print(f"✅ created {p['name']} with id {p['id']}")
        return p
    except httpx.HTTPError as e:
        print(f"❌ create {n} failed: {e}")
        return None

async def main():
    c = StoreClient()
    c.reset()

    print("\n⚡ Creating products concurrently...")
    results = await asyncio.gather(*(create(c, n) for n in range(1, 11)))

    ids = [p["id"] for p in results if p]
    print(f"\n🆔 Assigned ids: {sorted(ids)}")
    print(f"🔁 Duplicates: {len(ids) - len(set(ids))}")
    print(f"📦 Catalog size: {len(c.list_products())}")

if __name__ == "__main__":
    asyncio.run(main())
