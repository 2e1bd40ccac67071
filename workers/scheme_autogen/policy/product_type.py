"""
Product types and their scheme-relevant capabilities.

Values are the ``productType`` identifiers used in Xcode project files.
Only used by the loader to fill in capability flags and the default
launch environment when a target descriptor leaves them out.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class ProductType(str, Enum):
    APPLICATION                 = "com.apple.product-type.application"
    MESSAGES_APPLICATION        = "com.apple.product-type.application.messages"
    ON_DEMAND_INSTALL_APP       = "com.apple.product-type.application.on-demand-install-capable"
    WATCH_APP                   = "com.apple.product-type.application.watchapp"
    WATCH2_APP                  = "com.apple.product-type.application.watchapp2"
    WATCH2_APP_CONTAINER        = "com.apple.product-type.application.watchapp2-container"
    APP_EXTENSION               = "com.apple.product-type.app-extension"
    INTENTS_SERVICE_EXTENSION   = "com.apple.product-type.app-extension.intents-service"
    MESSAGES_EXTENSION          = "com.apple.product-type.app-extension.messages"
    STICKER_PACK                = "com.apple.product-type.app-extension.messages-sticker-pack"
    TV_EXTENSION                = "com.apple.product-type.tv-app-extension"
    EXTENSION_KIT_EXTENSION     = "com.apple.product-type.extensionkit-extension"
    WATCH_EXTENSION             = "com.apple.product-type.watchkit-extension"
    WATCH2_EXTENSION            = "com.apple.product-type.watchkit2-extension"
    XCODE_EXTENSION             = "com.apple.product-type.xcode-extension"
    COMMAND_LINE_TOOL           = "com.apple.product-type.tool"
    FRAMEWORK                   = "com.apple.product-type.framework"
    STATIC_FRAMEWORK            = "com.apple.product-type.framework.static"
    XC_FRAMEWORK                = "com.apple.product-type.xcframework"
    DYNAMIC_LIBRARY             = "com.apple.product-type.library.dynamic"
    STATIC_LIBRARY              = "com.apple.product-type.library.static"
    BUNDLE                      = "com.apple.product-type.bundle"
    UNIT_TEST_BUNDLE            = "com.apple.product-type.bundle.unit-test"
    UI_TEST_BUNDLE              = "com.apple.product-type.bundle.ui-testing"
    OC_UNIT_TEST_BUNDLE         = "com.apple.product-type.bundle.ocunit-test"
    INSTRUMENTS_PACKAGE         = "com.apple.product-type.instruments-package"
    XPC_SERVICE                 = "com.apple.product-type.xpc-service"
    DRIVER_EXTENSION            = "com.apple.product-type.driver-extension"
    SYSTEM_EXTENSION            = "com.apple.product-type.system-extension"

    @property
    def is_test_bundle(self) -> bool:
        return self in _TEST_BUNDLES

    @property
    def is_launchable(self) -> bool:
        return self in _LAUNCHABLE

    @property
    def bazel_launch_environment_variables(self) -> Optional[Dict[str, str]]:
        """Environment handed to launched products when Bazel drives builds.

        *None* for products that are never launched directly.
        """
        if not self.is_launchable:
            return None
        return dict(_BAZEL_LAUNCH_ENVIRONMENT)


_TEST_BUNDLES = frozenset({
    ProductType.UNIT_TEST_BUNDLE,
    ProductType.UI_TEST_BUNDLE,
    ProductType.OC_UNIT_TEST_BUNDLE,
})

_LAUNCHABLE = frozenset({
    ProductType.APPLICATION,
    ProductType.MESSAGES_APPLICATION,
    ProductType.ON_DEMAND_INSTALL_APP,
    ProductType.WATCH_APP,
    ProductType.WATCH2_APP,
    ProductType.WATCH2_APP_CONTAINER,
    ProductType.APP_EXTENSION,
    ProductType.INTENTS_SERVICE_EXTENSION,
    ProductType.MESSAGES_EXTENSION,
    ProductType.STICKER_PACK,
    ProductType.TV_EXTENSION,
    ProductType.EXTENSION_KIT_EXTENSION,
    ProductType.WATCH_EXTENSION,
    ProductType.WATCH2_EXTENSION,
    ProductType.XCODE_EXTENSION,
    ProductType.COMMAND_LINE_TOOL,
})

_BAZEL_LAUNCH_ENVIRONMENT: Dict[str, str] = {
    "BUILD_WORKSPACE_DIRECTORY": "$(BUILD_WORKSPACE_DIRECTORY)",
}
