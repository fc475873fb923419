HEALTHY = 'healthy'
