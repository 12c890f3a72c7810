"""Declarative catalogue of the Square REST endpoints exposed as tools.

Each service maps method names to an :class:`Endpoint`.  Path parameters
appear as ``{placeholders}`` and are filled from the caller's request at
call time; ``fields`` lists the remaining request properties together
with their JSON type for ``get_type_info``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

_PLACEHOLDER = re.compile(r"{(\w+)}")


@dataclass(frozen=True)
class Endpoint:
    """One Square REST operation."""

    http_method: str
    path: str
    description: str
    request_type: str
    is_write: bool = False
    fields: Mapping[str, str] = field(default_factory=dict)

    @property
    def path_params(self) -> list[str]:
        return _PLACEHOLDER.findall(self.path)


def _read(
    http_method: str,
    path: str,
    description: str,
    request_type: str,
    **fields: str,
) -> Endpoint:
    return Endpoint(http_method, path, description, request_type, False, fields)


def _write(
    http_method: str,
    path: str,
    description: str,
    request_type: str,
    **fields: str,
) -> Endpoint:
    return Endpoint(http_method, path, description, request_type, True, fields)


_PAGE = {"cursor": "string", "limit": "integer"}


def _custom_attributes(
    resource: str,
    owner_param: str,
    upsert_method: str = "POST",
) -> dict[str, Endpoint]:
    """Custom-attribute definitions and values attached to one resource type."""
    title = resource[:1].upper() + resource[1:]
    definitions = f"/v2/{resource}s/custom-attribute-definitions"
    values = f"/v2/{resource}s/{{{owner_param}}}/custom-attributes"
    return {
        "listDefinitions": _read(
            "GET", definitions,
            f"Lists the {resource} custom attribute definitions that belong to a Square seller account.",
            f"List{title}CustomAttributeDefinitionsRequest", **_PAGE,
        ),
        "retrieveDefinition": _read(
            "GET", f"{definitions}/{{key}}",
            f"Retrieves a {resource} custom attribute definition.",
            f"Retrieve{title}CustomAttributeDefinitionRequest", version="integer",
        ),
        "createDefinition": _write(
            "POST", definitions,
            f"Creates a {resource}-related custom attribute definition.",
            f"Create{title}CustomAttributeDefinitionRequest",
            custom_attribute_definition="object", idempotency_key="string",
        ),
        "deleteDefinition": _write(
            "DELETE", f"{definitions}/{{key}}",
            f"Deletes a {resource}-related custom attribute definition.",
            f"Delete{title}CustomAttributeDefinitionRequest",
        ),
        "list": _read(
            "GET", values,
            f"Lists the custom attributes associated with a {resource}.",
            f"List{title}CustomAttributesRequest", with_definitions="boolean", **_PAGE,
        ),
        "retrieve": _read(
            "GET", f"{values}/{{key}}",
            f"Retrieves a custom attribute associated with a {resource}.",
            f"Retrieve{title}CustomAttributeRequest",
            with_definition="boolean", version="integer",
        ),
        "upsert": _write(
            upsert_method, f"{values}/{{key}}",
            f"Creates or updates a custom attribute for a {resource}.",
            f"Upsert{title}CustomAttributeRequest",
            custom_attribute="object", idempotency_key="string",
        ),
        "delete": _write(
            "DELETE", f"{values}/{{key}}",
            f"Deletes a custom attribute associated with a {resource}.",
            f"Delete{title}CustomAttributeRequest",
        ),
    }


SERVICES: dict[str, dict[str, Endpoint]] = {
    "ApplePay": {
        "registerDomain": _write(
            "POST", "/v2/apple-pay/domains",
            "Activates a domain for use with Apple Pay on the Web and Square.",
            "RegisterDomainRequest", domain_name="string",
        ),
    },
    "BankAccounts": {
        "list": _read(
            "GET", "/v2/bank-accounts",
            "Returns a list of bank accounts linked to a Square account.",
            "ListBankAccountsRequest", location_id="string", **_PAGE,
        ),
        "get": _read(
            "GET", "/v2/bank-accounts/{bank_account_id}",
            "Returns details of a bank account linked to a Square account.",
            "GetBankAccountRequest",
        ),
    },
    "BookingCustomAttributes": _custom_attributes("booking", "booking_id", upsert_method="PUT"),
    "Bookings": {
        "list": _read(
            "GET", "/v2/bookings",
            "Retrieve a collection of bookings.",
            "ListBookingsRequest", location_id="string", team_member_id="string",
            start_at_min="string", start_at_max="string", **_PAGE,
        ),
        "get": _read(
            "GET", "/v2/bookings/{booking_id}",
            "Retrieves a booking.",
            "GetBookingRequest",
        ),
        "searchAvailability": _read(
            "POST", "/v2/bookings/availability/search",
            "Searches for availabilities for booking.",
            "SearchAvailabilityRequest", query="object",
        ),
        "create": _write(
            "POST", "/v2/bookings",
            "Creates a booking.",
            "CreateBookingRequest", booking="object", idempotency_key="string",
        ),
        "update": _write(
            "PUT", "/v2/bookings/{booking_id}",
            "Updates a booking.",
            "UpdateBookingRequest", booking="object", idempotency_key="string",
        ),
        "cancel": _write(
            "POST", "/v2/bookings/{booking_id}/cancel",
            "Cancels an existing booking.",
            "CancelBookingRequest", booking_version="integer", idempotency_key="string",
        ),
    },
    "Cards": {
        "list": _read(
            "GET", "/v2/cards",
            "Retrieves a list of cards owned by the account making the request.",
            "ListCardsRequest", customer_id="string", include_disabled="boolean",
            reference_id="string", sort_order="string", cursor="string",
        ),
        "retrieve": _read(
            "GET", "/v2/cards/{card_id}",
            "Retrieves details for a specific Card.",
            "RetrieveCardRequest",
        ),
        "create": _write(
            "POST", "/v2/cards",
            "Adds a card on file to an existing merchant.",
            "CreateCardRequest", idempotency_key="string", source_id="string",
            verification_token="string", card="object",
        ),
        "disable": _write(
            "POST", "/v2/cards/{card_id}/disable",
            "Disables the card, preventing any further updates or charges.",
            "DisableCardRequest",
        ),
    },
    "CashDrawers": {
        "listShifts": _read(
            "GET", "/v2/cash-drawers/shifts",
            "Provides the details for all of the cash drawer shifts for a location in a date range.",
            "ListCashDrawerShiftsRequest", location_id="string", sort_order="string",
            begin_time="string", end_time="string", **_PAGE,
        ),
        "retrieveShift": _read(
            "GET", "/v2/cash-drawers/shifts/{shift_id}",
            "Provides the summary details for a single cash drawer shift.",
            "RetrieveCashDrawerShiftRequest", location_id="string",
        ),
        "listShiftEvents": _read(
            "GET", "/v2/cash-drawers/shifts/{shift_id}/events",
            "Provides a paginated list of events for a single cash drawer shift.",
            "ListCashDrawerShiftEventsRequest", location_id="string", **_PAGE,
        ),
    },
    "Catalog": {
        "info": _read(
            "GET", "/v2/catalog/info",
            "Retrieves information about the Square Catalog API, such as batch size limits.",
            "CatalogInfoRequest",
        ),
        "list": _read(
            "GET", "/v2/catalog/list",
            "Returns a list of all catalog objects of the specified types.",
            "ListCatalogRequest", types="string", catalog_version="integer", cursor="string",
        ),
        "get": _read(
            "GET", "/v2/catalog/object/{object_id}",
            "Returns a single catalog object along with its related objects.",
            "RetrieveCatalogObjectRequest", include_related_objects="boolean",
        ),
        "search": _read(
            "POST", "/v2/catalog/search",
            "Searches for catalog objects of any type by matching supported search attribute values.",
            "SearchCatalogObjectsRequest", object_types="array", query="object",
            include_deleted_objects="boolean", include_related_objects="boolean", **_PAGE,
        ),
        "searchItems": _read(
            "POST", "/v2/catalog/search-catalog-items",
            "Searches for catalog items or item variations by matching supported search attribute values.",
            "SearchCatalogItemsRequest", text_filter="string", category_ids="array",
            stock_levels="array", enabled_location_ids="array", **_PAGE,
        ),
        "batchGet": _read(
            "POST", "/v2/catalog/batch-retrieve",
            "Returns a set of objects based on the provided ID.",
            "BatchRetrieveCatalogObjectsRequest", object_ids="array",
            include_related_objects="boolean",
        ),
        "create": _write(
            "POST", "/v2/catalog/object",
            "Creates a new or updates the specified catalog object.",
            "UpsertCatalogObjectRequest", idempotency_key="string", object="object",
        ),
        "batchUpsert": _write(
            "POST", "/v2/catalog/batch-upsert",
            "Creates or updates up to 10,000 target objects based on the provided list of objects.",
            "BatchUpsertCatalogObjectsRequest", idempotency_key="string", batches="array",
        ),
        "delete": _write(
            "DELETE", "/v2/catalog/object/{object_id}",
            "Deletes a single catalog object and its children.",
            "DeleteCatalogObjectRequest",
        ),
        "batchDelete": _write(
            "POST", "/v2/catalog/batch-delete",
            "Deletes a set of catalog objects based on the provided list of target IDs.",
            "BatchDeleteCatalogObjectsRequest", object_ids="array",
        ),
    },
    "Checkout": {
        "listPaymentLinks": _read(
            "GET", "/v2/online-checkout/payment-links",
            "Lists all payment links.",
            "ListPaymentLinksRequest", **_PAGE,
        ),
        "getPaymentLink": _read(
            "GET", "/v2/online-checkout/payment-links/{id}",
            "Retrieves a payment link.",
            "RetrievePaymentLinkRequest",
        ),
        "createPaymentLink": _write(
            "POST", "/v2/online-checkout/payment-links",
            "Creates a Square-hosted checkout page.",
            "CreatePaymentLinkRequest", idempotency_key="string", quick_pay="object",
            order="object", checkout_options="object",
        ),
        "deletePaymentLink": _write(
            "DELETE", "/v2/online-checkout/payment-links/{id}",
            "Deletes a payment link.",
            "DeletePaymentLinkRequest",
        ),
    },
    "CustomerCustomAttributes": _custom_attributes("customer", "customer_id"),
    "CustomerGroups": {
        "list": _read(
            "GET", "/v2/customers/groups",
            "Retrieves the list of customer groups of a business.",
            "ListCustomerGroupsRequest", **_PAGE,
        ),
        "retrieve": _read(
            "GET", "/v2/customers/groups/{group_id}",
            "Retrieves a specific customer group.",
            "RetrieveCustomerGroupRequest",
        ),
        "create": _write(
            "POST", "/v2/customers/groups",
            "Creates a new customer group for a business.",
            "CreateCustomerGroupRequest", idempotency_key="string", group="object",
        ),
        "update": _write(
            "PUT", "/v2/customers/groups/{group_id}",
            "Updates a customer group.",
            "UpdateCustomerGroupRequest", group="object",
        ),
        "delete": _write(
            "DELETE", "/v2/customers/groups/{group_id}",
            "Deletes a customer group.",
            "DeleteCustomerGroupRequest",
        ),
    },
    "CustomerSegments": {
        "list": _read(
            "GET", "/v2/customers/segments",
            "Retrieves the list of customer segments of a business.",
            "ListCustomerSegmentsRequest", **_PAGE,
        ),
        "retrieve": _read(
            "GET", "/v2/customers/segments/{segment_id}",
            "Retrieves a specific customer segment.",
            "RetrieveCustomerSegmentRequest",
        ),
    },
    "Customers": {
        "list": _read(
            "GET", "/v2/customers",
            "Lists customer profiles associated with a Square account.",
            "ListCustomersRequest", sort_field="string", sort_order="string", **_PAGE,
        ),
        "get": _read(
            "GET", "/v2/customers/{customer_id}",
            "Returns details for a single customer.",
            "RetrieveCustomerRequest",
        ),
        "search": _read(
            "POST", "/v2/customers/search",
            "Searches the customer profiles associated with a Square account using filters.",
            "SearchCustomersRequest", query="object", count="boolean", **_PAGE,
        ),
        "create": _write(
            "POST", "/v2/customers",
            "Creates a new customer for a business.",
            "CreateCustomerRequest", idempotency_key="string", given_name="string",
            family_name="string", company_name="string", email_address="string",
            phone_number="string", address="object", note="string",
        ),
        "update": _write(
            "PUT", "/v2/customers/{customer_id}",
            "Updates a customer profile.",
            "UpdateCustomerRequest", given_name="string", family_name="string",
            email_address="string", phone_number="string", note="string", version="integer",
        ),
        "delete": _write(
            "DELETE", "/v2/customers/{customer_id}",
            "Deletes a customer profile from a business.",
            "DeleteCustomerRequest", version="integer",
        ),
    },
    "Devices": {
        "list": _read(
            "GET", "/v2/devices",
            "List devices associated with the merchant.",
            "ListDevicesRequest", location_id="string", sort_order="string", **_PAGE,
        ),
        "get": _read(
            "GET", "/v2/devices/{device_id}",
            "Retrieves a Device with the associated device_id.",
            "GetDeviceRequest",
        ),
        "listDeviceCodes": _read(
            "GET", "/v2/devices/codes",
            "Lists all DeviceCodes associated with the merchant.",
            "ListDeviceCodesRequest", location_id="string", product_type="string",
            status="string", cursor="string",
        ),
        "getDeviceCode": _read(
            "GET", "/v2/devices/codes/{id}",
            "Retrieves DeviceCode with the associated ID.",
            "GetDeviceCodeRequest",
        ),
        "createDeviceCode": _write(
            "POST", "/v2/devices/codes",
            "Creates a DeviceCode that can be used to login to a Square Terminal device.",
            "CreateDeviceCodeRequest", idempotency_key="string", device_code="object",
        ),
    },
    "Disputes": {
        "list": _read(
            "GET", "/v2/disputes",
            "Returns a list of disputes associated with a particular account.",
            "ListDisputesRequest", states="string", location_id="string", cursor="string",
        ),
        "get": _read(
            "GET", "/v2/disputes/{dispute_id}",
            "Returns details about a specific dispute.",
            "RetrieveDisputeRequest",
        ),
        "accept": _write(
            "POST", "/v2/disputes/{dispute_id}/accept",
            "Accepts the loss on a dispute.",
            "AcceptDisputeRequest",
        ),
    },
    "Events": {
        "searchEvents": _read(
            "POST", "/v2/events",
            "Search for Square API events that occur within a 28-day timeframe.",
            "SearchEventsRequest", query="object", **_PAGE,
        ),
        "listEventTypes": _read(
            "GET", "/v2/events/types",
            "Lists all event types that you can subscribe to as webhooks or query using the Events API.",
            "ListEventTypesRequest", api_version="string",
        ),
        "enableEvents": _write(
            "PUT", "/v2/events/enable",
            "Enables events to make them searchable.",
            "EnableEventsRequest",
        ),
        "disableEvents": _write(
            "PUT", "/v2/events/disable",
            "Disables events to prevent them from being searchable.",
            "DisableEventsRequest",
        ),
    },
    "GiftCardActivities": {
        "list": _read(
            "GET", "/v2/gift-cards/activities",
            "Lists gift card activities.",
            "ListGiftCardActivitiesRequest", gift_card_id="string", type="string",
            location_id="string", begin_time="string", end_time="string",
            sort_order="string", **_PAGE,
        ),
        "create": _write(
            "POST", "/v2/gift-cards/activities",
            "Creates a gift card activity to manage the balance or state of a gift card.",
            "CreateGiftCardActivityRequest", idempotency_key="string",
            gift_card_activity="object",
        ),
    },
    "GiftCards": {
        "list": _read(
            "GET", "/v2/gift-cards",
            "Lists all gift cards.",
            "ListGiftCardsRequest", type="string", state="string", customer_id="string", **_PAGE,
        ),
        "get": _read(
            "GET", "/v2/gift-cards/{id}",
            "Retrieves a gift card using the gift card ID.",
            "RetrieveGiftCardRequest",
        ),
        "create": _write(
            "POST", "/v2/gift-cards",
            "Creates a digital gift card or registers a physical gift card.",
            "CreateGiftCardRequest", idempotency_key="string", location_id="string",
            gift_card="object",
        ),
    },
    "Inventory": {
        "get": _read(
            "GET", "/v2/inventory/{catalog_object_id}",
            "Retrieves the current calculated stock count for a given catalog object.",
            "RetrieveInventoryCountRequest", location_ids="string", cursor="string",
        ),
        "batchGetCounts": _read(
            "POST", "/v2/inventory/counts/batch-retrieve",
            "Returns current counts for the provided catalog objects at the requested locations.",
            "BatchRetrieveInventoryCountsRequest", catalog_object_ids="array",
            location_ids="array", updated_after="string", cursor="string",
        ),
        "batchCreateChanges": _write(
            "POST", "/v2/inventory/changes/batch-create",
            "Applies adjustments and counts to the provided item quantities.",
            "BatchChangeInventoryRequest", idempotency_key="string", changes="array",
            ignore_unchanged_counts="boolean",
        ),
    },
    "Invoices": {
        "list": _read(
            "GET", "/v2/invoices",
            "Returns a list of invoices for a given location.",
            "ListInvoicesRequest", location_id="string", **_PAGE,
        ),
        "get": _read(
            "GET", "/v2/invoices/{invoice_id}",
            "Retrieves an invoice by invoice ID.",
            "GetInvoiceRequest",
        ),
        "search": _read(
            "POST", "/v2/invoices/search",
            "Searches for invoices from a location specified in the filter.",
            "SearchInvoicesRequest", query="object", **_PAGE,
        ),
        "create": _write(
            "POST", "/v2/invoices",
            "Creates a draft invoice for an order created using the Orders API.",
            "CreateInvoiceRequest", invoice="object", idempotency_key="string",
        ),
        "publish": _write(
            "POST", "/v2/invoices/{invoice_id}/publish",
            "Publishes the specified draft invoice.",
            "PublishInvoiceRequest", version="integer", idempotency_key="string",
        ),
        "cancel": _write(
            "POST", "/v2/invoices/{invoice_id}/cancel",
            "Cancels an invoice.",
            "CancelInvoiceRequest", version="integer",
        ),
        "delete": _write(
            "DELETE", "/v2/invoices/{invoice_id}",
            "Deletes the specified invoice.",
            "DeleteInvoiceRequest", version="integer",
        ),
    },
    "Labor": {
        "searchShifts": _read(
            "POST", "/v2/labor/shifts/search",
            "Returns a paginated list of Shift records for a business.",
            "SearchShiftsRequest", query="object", **_PAGE,
        ),
        "getShift": _read(
            "GET", "/v2/labor/shifts/{id}",
            "Returns a single Shift specified by id.",
            "GetShiftRequest",
        ),
    },
    "LocationCustomAttributes": _custom_attributes("location", "location_id"),
    "Locations": {
        "list": _read(
            "GET", "/v2/locations",
            "Provides details about all of the seller's locations.",
            "ListLocationsRequest",
        ),
        "get": _read(
            "GET", "/v2/locations/{location_id}",
            "Retrieves details of a single location.",
            "RetrieveLocationRequest",
        ),
        "create": _write(
            "POST", "/v2/locations",
            "Creates a location.",
            "CreateLocationRequest", location="object",
        ),
        "update": _write(
            "PUT", "/v2/locations/{location_id}",
            "Updates a location.",
            "UpdateLocationRequest", location="object",
        ),
    },
    "Loyalty": {
        "getProgram": _read(
            "GET", "/v2/loyalty/programs/{program_id}",
            "Retrieves the loyalty program in a seller's account.",
            "RetrieveLoyaltyProgramRequest",
        ),
        "searchAccounts": _read(
            "POST", "/v2/loyalty/accounts/search",
            "Searches for loyalty accounts in a loyalty program.",
            "SearchLoyaltyAccountsRequest", query="object", **_PAGE,
        ),
        "getAccount": _read(
            "GET", "/v2/loyalty/accounts/{account_id}",
            "Retrieves a loyalty account.",
            "RetrieveLoyaltyAccountRequest",
        ),
        "accumulatePoints": _write(
            "POST", "/v2/loyalty/accounts/{account_id}/accumulate",
            "Adds points earned from a purchase to a loyalty account.",
            "AccumulateLoyaltyPointsRequest", accumulate_points="object",
            idempotency_key="string", location_id="string",
        ),
    },
    "MerchantCustomAttributes": _custom_attributes("merchant", "merchant_id"),
    "Merchants": {
        "list": _read(
            "GET", "/v2/merchants",
            "Provides details about the merchant associated with a given access token.",
            "ListMerchantsRequest", cursor="integer",
        ),
        "get": _read(
            "GET", "/v2/merchants/{merchant_id}",
            "Retrieves the Merchant object for the given merchant_id.",
            "RetrieveMerchantRequest",
        ),
    },
    "OAuth": {
        "retrieveTokenStatus": _read(
            "POST", "/oauth2/token/status",
            "Returns information about an OAuth access token or an application's personal access token.",
            "RetrieveTokenStatusRequest",
        ),
        "obtainToken": _write(
            "POST", "/oauth2/token",
            "Returns an OAuth access token and a refresh token.",
            "ObtainTokenRequest", client_id="string", client_secret="string",
            code="string", redirect_uri="string", grant_type="string",
            refresh_token="string", code_verifier="string",
        ),
        "revokeToken": _write(
            "POST", "/oauth2/revoke",
            "Revokes an access token generated with the OAuth flow.",
            "RevokeTokenRequest", client_id="string", access_token="string",
            merchant_id="string", revoke_only_access_token="boolean",
        ),
    },
    "OrderCustomAttributes": _custom_attributes("order", "order_id"),
    "Orders": {
        "get": _read(
            "GET", "/v2/orders/{order_id}",
            "Retrieves an Order by ID.",
            "RetrieveOrderRequest",
        ),
        "batchGet": _read(
            "POST", "/v2/orders/batch-retrieve",
            "Retrieves a set of orders by their IDs.",
            "BatchRetrieveOrdersRequest", location_id="string", order_ids="array",
        ),
        "search": _read(
            "POST", "/v2/orders/search",
            "Search all orders for one or more locations.",
            "SearchOrdersRequest", location_ids="array", query="object",
            return_entries="boolean", **_PAGE,
        ),
        "calculate": _read(
            "POST", "/v2/orders/calculate",
            "Enables applications to preview order pricing without creating an order.",
            "CalculateOrderRequest", order="object", proposed_rewards="array",
        ),
        "create": _write(
            "POST", "/v2/orders",
            "Creates a new Order that can include information about products for purchase.",
            "CreateOrderRequest", order="object", idempotency_key="string",
        ),
        "update": _write(
            "PUT", "/v2/orders/{order_id}",
            "Updates an open order by adding, replacing, or deleting fields.",
            "UpdateOrderRequest", order="object", fields_to_clear="array",
            idempotency_key="string",
        ),
        "pay": _write(
            "POST", "/v2/orders/{order_id}/pay",
            "Pay for an order using one or more approved payments.",
            "PayOrderRequest", idempotency_key="string", order_version="integer",
            payment_ids="array",
        ),
    },
    "Payments": {
        "list": _read(
            "GET", "/v2/payments",
            "Retrieves a list of payments taken by the account making the request.",
            "ListPaymentsRequest", begin_time="string", end_time="string",
            sort_order="string", location_id="string", **_PAGE,
        ),
        "get": _read(
            "GET", "/v2/payments/{payment_id}",
            "Retrieves details for a specific payment.",
            "GetPaymentRequest",
        ),
        "create": _write(
            "POST", "/v2/payments",
            "Creates a payment using the provided source.",
            "CreatePaymentRequest", source_id="string", idempotency_key="string",
            amount_money="object", tip_money="object", autocomplete="boolean",
            order_id="string", customer_id="string", location_id="string",
            reference_id="string", note="string",
        ),
        "cancel": _write(
            "POST", "/v2/payments/{payment_id}/cancel",
            "Cancels (voids) a payment.",
            "CancelPaymentRequest",
        ),
        "complete": _write(
            "POST", "/v2/payments/{payment_id}/complete",
            "Completes (captures) a payment.",
            "CompletePaymentRequest", version_token="string",
        ),
    },
    "Payouts": {
        "list": _read(
            "GET", "/v2/payouts",
            "Retrieves a list of all payouts for the default location.",
            "ListPayoutsRequest", location_id="string", status="string",
            begin_time="string", end_time="string", **_PAGE,
        ),
        "get": _read(
            "GET", "/v2/payouts/{payout_id}",
            "Retrieves details of a specific payout identified by a payout ID.",
            "GetPayoutRequest",
        ),
        "listEntries": _read(
            "GET", "/v2/payouts/{payout_id}/payout-entries",
            "Retrieves a list of all payout entries for a specific payout.",
            "ListPayoutEntriesRequest", sort_order="string", **_PAGE,
        ),
    },
    "Refunds": {
        "list": _read(
            "GET", "/v2/refunds",
            "Retrieves a list of refunds for the account making the request.",
            "ListPaymentRefundsRequest", begin_time="string", end_time="string",
            location_id="string", status="string", **_PAGE,
        ),
        "get": _read(
            "GET", "/v2/refunds/{refund_id}",
            "Retrieves a specific refund using the refund_id.",
            "GetPaymentRefundRequest",
        ),
        "refundPayment": _write(
            "POST", "/v2/refunds",
            "Refunds a payment.",
            "RefundPaymentRequest", idempotency_key="string", amount_money="object",
            payment_id="string", reason="string",
        ),
    },
    "Sites": {
        "list": _read(
            "GET", "/v2/sites",
            "Lists the Square Online sites that belong to a seller.",
            "ListSitesRequest",
        ),
    },
    "Snippets": {
        "retrieve": _read(
            "GET", "/v2/sites/{site_id}/snippet",
            "Retrieves your snippet from a Square Online site.",
            "RetrieveSnippetRequest",
        ),
        "upsert": _write(
            "POST", "/v2/sites/{site_id}/snippet",
            "Adds a snippet to a Square Online site or updates the existing snippet on the site.",
            "UpsertSnippetRequest", snippet="object",
        ),
        "delete": _write(
            "DELETE", "/v2/sites/{site_id}/snippet",
            "Removes your snippet from a Square Online site.",
            "DeleteSnippetRequest",
        ),
    },
    "Subscriptions": {
        "search": _read(
            "POST", "/v2/subscriptions/search",
            "Searches for subscriptions.",
            "SearchSubscriptionsRequest", query="object", include="array", **_PAGE,
        ),
        "get": _read(
            "GET", "/v2/subscriptions/{subscription_id}",
            "Retrieves a specific subscription.",
            "RetrieveSubscriptionRequest", include="string",
        ),
        "create": _write(
            "POST", "/v2/subscriptions",
            "Enrolls a customer in a subscription.",
            "CreateSubscriptionRequest", idempotency_key="string", location_id="string",
            plan_variation_id="string", customer_id="string", start_date="string",
        ),
        "cancel": _write(
            "POST", "/v2/subscriptions/{subscription_id}/cancel",
            "Schedules a CANCEL action to cancel an active subscription.",
            "CancelSubscriptionRequest",
        ),
    },
    "Team": {
        "searchMembers": _read(
            "POST", "/v2/team-members/search",
            "Returns a paginated list of TeamMember objects for a business.",
            "SearchTeamMembersRequest", query="object", **_PAGE,
        ),
        "getMember": _read(
            "GET", "/v2/team-members/{team_member_id}",
            "Retrieves a TeamMember object for the given team_member_id.",
            "RetrieveTeamMemberRequest",
        ),
        "createMember": _write(
            "POST", "/v2/team-members",
            "Creates a single TeamMember object.",
            "CreateTeamMemberRequest", idempotency_key="string", team_member="object",
        ),
    },
    "Terminal": {
        "searchCheckouts": _read(
            "POST", "/v2/terminals/checkouts/search",
            "Returns a filtered list of Terminal checkout requests.",
            "SearchTerminalCheckoutsRequest", query="object", **_PAGE,
        ),
        "createCheckout": _write(
            "POST", "/v2/terminals/checkouts",
            "Creates a Terminal checkout request and sends it to the specified device.",
            "CreateTerminalCheckoutRequest", idempotency_key="string", checkout="object",
        ),
        "cancelCheckout": _write(
            "POST", "/v2/terminals/checkouts/{checkout_id}/cancel",
            "Cancels a Terminal checkout request if the status of the request permits it.",
            "CancelTerminalCheckoutRequest",
        ),
    },
    "Vendors": {
        "retrieve": _read(
            "GET", "/v2/vendors/{vendor_id}",
            "Retrieves the vendor of a specified Vendor ID.",
            "RetrieveVendorRequest",
        ),
        "search": _read(
            "POST", "/v2/vendors/search",
            "Searches for vendors using a filter against supported Vendor properties.",
            "SearchVendorsRequest", filter="object", sort="object", cursor="string",
        ),
        "batchRetrieve": _read(
            "POST", "/v2/vendors/bulk-retrieve",
            "Retrieves one or more vendors of specified Vendor IDs.",
            "BulkRetrieveVendorsRequest", vendor_ids="array",
        ),
        "create": _write(
            "POST", "/v2/vendors/create",
            "Creates a single Vendor object to represent a supplier to a seller.",
            "CreateVendorRequest", idempotency_key="string", vendor="object",
        ),
        "update": _write(
            "PUT", "/v2/vendors/{vendor_id}",
            "Modifies an existing Vendor object as a supplier to a seller.",
            "UpdateVendorRequest", idempotency_key="string", vendor="object",
        ),
    },
    "WebhookSubscriptions": {
        "list": _read(
            "GET", "/v2/webhooks/subscriptions",
            "Lists all webhook subscriptions owned by your application.",
            "ListWebhookSubscriptionsRequest", include_disabled="boolean",
            sort_order="string", **_PAGE,
        ),
        "create": _write(
            "POST", "/v2/webhooks/subscriptions",
            "Creates a webhook subscription.",
            "CreateWebhookSubscriptionRequest", idempotency_key="string",
            subscription="object",
        ),
        "delete": _write(
            "DELETE", "/v2/webhooks/subscriptions/{subscription_id}",
            "Deletes a webhook subscription.",
            "DeleteWebhookSubscriptionRequest",
        ),
    },
}
