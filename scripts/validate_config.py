#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from p2p_trade_app.config.loader import ConfigLoader
from p2p_trade_app.config.validation import ConfigValidator, ValidationError


def validate_merged_config(config_dir: Path) -> List[ValidationError]:
    """Validate the merged configuration of a config directory."""
    loader = ConfigLoader.create(config_dir)
    return ConfigValidator.validate_config(loader.merge_config())


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else project_root / "config"
    print(f"🔍 Validating trade utility configuration in {config_dir}...")

    try:
        errors = validate_merged_config(config_dir)
    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    loader = ConfigLoader.create(config_dir)
    config = ConfigLoader.build_config(loader.merge_config())
    strings = loader.load_strings(config.locale.language)
    print(f"✅ Base currency: {config.locale.base_currency_code}")
    print(f"✅ Language: {config.locale.language} ({len(strings)} string overrides)")
    print(f"✅ Fiat currencies: {len(config.currency.fiat_currency_codes)}")
    print("\n🎉 Configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
