from ...models.descriptors import ProviderConfig

CONFIG = ProviderConfig(api_key_required=False)
