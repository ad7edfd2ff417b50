#!/usr/bin/env python3
"""
Example of converting addresses between native and Universal formats.
"""
from intentportal_sdk import (
    AddressNormalizer,
    ChainType,
    detect,
    detect_from_address,
    get_chain_name,
)

ADDRESSES = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t",
    "EPjFWdd5AufqSyqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
]


def main():
    for chain_id in (1, 8453, 728126428, 1399811149):
        print(f"{chain_id}: {get_chain_name(chain_id)} ({detect(chain_id).value})")
    print()

    for address in ADDRESSES:
        chain_type = detect_from_address(address)
        universal = AddressNormalizer.normalize(address, chain_type)
        print(f"{address} [{chain_type.value}]")
        print(f"  universal: {universal}")
        print(f"  native:    {AddressNormalizer.denormalize(universal, chain_type)}")

        # 20-byte values can also be rendered for the other account-hash chain
        if chain_type is ChainType.EVM:
            print(f"  as Tron:   {AddressNormalizer.denormalize(universal, ChainType.TVM)}")


if __name__ == "__main__":
    main()
