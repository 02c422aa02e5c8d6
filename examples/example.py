"""
Example usage of asyncframe - lazy, asynchronously iterable dataframes.
"""
import asyncio

from asyncframe import AsyncDataFrame, AsyncSeries


async def readings():
    """Pretend sensor feed: each reading arrives after a short delay."""
    for i in range(6):
        await asyncio.sleep(0.01)
        yield {"sensor": f"s{i % 2}", "celsius": 20 + i}


async def main():
    # Create a lazy frame; nothing is read yet
    print("Creating an AsyncDataFrame:")
    df = AsyncDataFrame(values=readings(), column_names=["sensor", "celsius"])
    print(df)
    print()

    # Bake once so the single-use feed can be reused
    baked = await df.bake()
    print(baked)
    print()

    # Transforms return new frames
    print("Skipping two readings and converting to fahrenheit:")
    fahrenheit = baked.lazy().skip(2).select(
        lambda row, index: {**row, "celsius": row["celsius"] * 9 / 5 + 32}
    )
    print(await fahrenheit.to_string())
    print()

    # Async selectors are awaited
    async def label(row, index):
        await asyncio.sleep(0)
        return f"{index}:{row['sensor']}"

    print("Labels:")
    print(await baked.lazy().select(label).take(3).to_array())
    print()

    # Series from a single column, re-indexed by sensor name
    temps = baked.lazy().get_series("celsius")
    sensors = baked.lazy().get_series("sensor")
    by_sensor = temps.with_index(sensors)
    print("Temperatures by sensor:")
    print(await by_sensor.to_pairs())
    print()

    # Standalone series
    series = AsyncSeries(values=[1.5, 2.5, 3.5], index=["a", "b", "c"], name="x")
    print(await series.to_json())
    print(await baked.lazy().to_csv())


if __name__ == "__main__":
    asyncio.run(main())
