from voicerest.common.environments import flag

in_global_debug_mode = flag('VOICEREST_DEBUG',
                            description='Enable the debug mode')
detailed_error = flag('VOICEREST_DETAILED_ERROR', description='Provide more details on error')
