# scanner/resource_types.py
# azurerm 3.x resource types that expose a `tags` attribute. Several
# (azurerm_sql_*, azurerm_app_service*, azurerm_function_app) are gone in 4.x.
AZURERM_TAGGABLE_RESOURCES = (
    "azurerm_api_management",
    "azurerm_app_configuration",
    "azurerm_app_service",
    "azurerm_app_service_environment_v3",
    "azurerm_app_service_plan",
    "azurerm_application_gateway",
    "azurerm_application_insights",
    "azurerm_application_security_group",
    "azurerm_automation_account",
    "azurerm_availability_set",
    "azurerm_bastion_host",
    "azurerm_batch_account",
    "azurerm_cdn_frontdoor_profile",
    "azurerm_cdn_profile",
    "azurerm_cognitive_account",
    "azurerm_container_app",
    "azurerm_container_app_environment",
    "azurerm_container_group",
    "azurerm_container_registry",
    "azurerm_cosmosdb_account",
    "azurerm_data_factory",
    "azurerm_databricks_workspace",
    "azurerm_dns_zone",
    "azurerm_eventgrid_topic",
    "azurerm_eventhub_namespace",
    "azurerm_express_route_circuit",
    "azurerm_firewall",
    "azurerm_firewall_policy",
    "azurerm_function_app",
    "azurerm_image",
    "azurerm_key_vault",
    "azurerm_kubernetes_cluster",
    "azurerm_kubernetes_cluster_node_pool",
    "azurerm_lb",
    "azurerm_linux_function_app",
    "azurerm_linux_virtual_machine",
    "azurerm_linux_virtual_machine_scale_set",
    "azurerm_linux_web_app",
    "azurerm_load_test",
    "azurerm_local_network_gateway",
    "azurerm_log_analytics_workspace",
    "azurerm_logic_app_workflow",
    "azurerm_managed_disk",
    "azurerm_mariadb_server",
    "azurerm_monitor_action_group",
    "azurerm_monitor_metric_alert",
    "azurerm_mssql_database",
    "azurerm_mssql_elasticpool",
    "azurerm_mssql_server",
    "azurerm_mysql_flexible_server",
    "azurerm_mysql_server",
    "azurerm_nat_gateway",
    "azurerm_network_interface",
    "azurerm_network_security_group",
    "azurerm_network_watcher",
    "azurerm_postgresql_flexible_server",
    "azurerm_postgresql_server",
    "azurerm_private_dns_zone",
    "azurerm_private_endpoint",
    "azurerm_public_ip",
    "azurerm_public_ip_prefix",
    "azurerm_recovery_services_vault",
    "azurerm_redis_cache",
    "azurerm_resource_group",
    "azurerm_route_table",
    "azurerm_search_service",
    "azurerm_service_plan",
    "azurerm_servicebus_namespace",
    "azurerm_signalr_service",
    "azurerm_snapshot",
    "azurerm_sql_database",
    "azurerm_sql_server",
    "azurerm_static_site",
    "azurerm_storage_account",
    "azurerm_synapse_workspace",
    "azurerm_user_assigned_identity",
    "azurerm_virtual_hub",
    "azurerm_virtual_machine",
    "azurerm_virtual_machine_scale_set",
    "azurerm_virtual_network",
    "azurerm_virtual_network_gateway",
    "azurerm_virtual_wan",
    "azurerm_windows_function_app",
    "azurerm_windows_virtual_machine",
    "azurerm_windows_virtual_machine_scale_set",
    "azurerm_windows_web_app",
)
